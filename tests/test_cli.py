import json

import pytest
from typer.testing import CliRunner

from orbgate import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("ORBGATE_HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)


def test_simulate_blocks_both_orbs():
    result = runner.invoke(cli.app, ["simulate"])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["orbs"]["hitpoints"] == {"hidden": False, "blocks_click_through": True}
    assert report["orbs"]["spec"] == {"hidden": False, "blocks_click_through": True}
    assert report["after_shutdown"]["hitpoints"] == {"hidden": True, "blocks_click_through": False}


def test_simulate_config_change():
    result = runner.invoke(cli.app, ["simulate", "--set", "blockHitpointsOrb=false", "--debilitated"])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["config"]["blockHitpointsOrb"] is False
    assert report["orbs"]["hitpoints"] == {"hidden": False, "blocks_click_through": True}


def test_simulate_fixed_layout_has_no_orbs():
    result = runner.invoke(cli.app, ["simulate", "--fixed"])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["resized"] is False
    assert report["orbs"] == {"hitpoints": None, "spec": None}


def test_simulate_rejects_unknown_key():
    result = runner.invoke(cli.app, ["simulate", "--set", "hideEverything=true"])
    assert result.exit_code == 2


def test_settings_section():
    result = runner.invoke(cli.app, ["settings", "orbs"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "blockHitpointsOrb": True,
        "blockSpecialAttackOrb": True,
    }
