"""Typer CLI for orbgate."""

from __future__ import annotations

import json
import platform

import typer
from pydantic import ValidationError

from orbgate.config import CONFIG_GROUP, load_settings
from orbgate.core.app import build_context
from orbgate.core.events import SCRIPT_POST_FIRED, ScriptPostFired
from orbgate.host.api import (
    HITPOINTS_ORB_CLICKABLE_CHILD_ID,
    SPEC_ORB_CLICKABLE_CHILD_ID,
    UPDATE_HITPOINTS_ORB_SCRIPT_ID,
    UPDATE_SPEC_ORB_SCRIPT_ID,
)
from orbgate.host.sim import DEFAULT_SPECIAL_ATTACK_ITEMS, SimClient
from orbgate.logging import configure_logging

app = typer.Typer(no_args_is_help=True)


@app.command()
def doctor() -> None:
    """Print environment diagnostics."""

    settings = load_settings()
    configure_logging(settings)
    info = {
        "python": platform.python_version(),
        "platform": platform.platform(),
        "paths": {
            "home": str(settings.paths.base_dir),
            "logs": str(settings.paths.logs_dir),
        },
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def settings(key: str | None = typer.Argument(None)) -> None:
    """Display current settings or a specific section."""

    data = load_settings().model_dump(by_alias=True)
    if key:
        data = data.get(key, {})
    typer.echo(json.dumps(data, indent=2, default=str))


@app.command()
def simulate(
    block_hitpoints: bool = typer.Option(True, "--block-hitpoints/--no-block-hitpoints"),
    block_spec: bool = typer.Option(True, "--block-spec/--no-block-spec"),
    debilitated: bool = typer.Option(False, "--debilitated", help="Start the player poisoned."),
    spec_item: bool = typer.Option(False, "--spec-item", help="Equip a special attack weapon."),
    fixed: bool = typer.Option(False, "--fixed", help="Use the legacy fixed layout."),
    set_option: list[str] = typer.Option(
        [], "--set", help="Apply KEY=VALUE config changes after start-up."
    ),
) -> None:
    """Run the gate against a simulated client and print the orb states."""

    loaded = load_settings()
    configure_logging(loaded)
    loaded.orbs.block_hitpoints_orb = block_hitpoints
    loaded.orbs.block_special_attack_orb = block_spec

    client = SimClient(resized=not fixed)
    if debilitated:
        client.set_poisoned()
    if spec_item:
        client.equip(DEFAULT_SPECIAL_ATTACK_ITEMS[0])

    ctx = build_context(loaded, client)
    ctx.start()
    ctx.client_thread.run_pending()

    for assignment in set_option:
        name, sep, value = assignment.partition("=")
        if not sep:
            typer.echo(f"Expected KEY=VALUE, got {assignment!r}", err=True)
            raise typer.Exit(code=2)
        try:
            ctx.config_manager.set_configuration(CONFIG_GROUP, name.strip(), value.strip())
        except KeyError:
            typer.echo(f"Unknown config key {name!r}", err=True)
            raise typer.Exit(code=2)
        except ValidationError as exc:
            typer.echo(f"Invalid value for {name!r}: {exc.errors()[0]['msg']}", err=True)
            raise typer.Exit(code=2)
        ctx.client_thread.run_pending()

    ctx.events.emit(SCRIPT_POST_FIRED, ScriptPostFired(UPDATE_HITPOINTS_ORB_SCRIPT_ID))
    ctx.events.emit(SCRIPT_POST_FIRED, ScriptPostFired(UPDATE_SPEC_ORB_SCRIPT_ID))

    report = {
        "resized": client.is_resized(),
        "config": ctx.config_manager.get_config().model_dump(by_alias=True),
        "orbs": {
            name: _describe(client, child_id)
            for name, child_id in (
                ("hitpoints", HITPOINTS_ORB_CLICKABLE_CHILD_ID),
                ("spec", SPEC_ORB_CLICKABLE_CHILD_ID),
            )
        },
    }

    ctx.stop()
    ctx.client_thread.run_pending()
    report["after_shutdown"] = {
        "hitpoints": _describe(client, HITPOINTS_ORB_CLICKABLE_CHILD_ID),
        "spec": _describe(client, SPEC_ORB_CLICKABLE_CHILD_ID),
    }
    typer.echo(json.dumps(report, indent=2))


def _describe(client: SimClient, child_id: int) -> dict[str, bool] | None:
    widget = client.minimap_widget(child_id)
    if widget is None:
        return None
    return {"hidden": widget.is_hidden(), "blocks_click_through": widget.blocks_click_through()}


if __name__ == "__main__":
    app()
