"""Minimap orb click blocker.

Keeps the hitpoints and special attack orbs from letting clicks fall through
to the game world underneath them. The host redraws both orbs from its own
scripts and resets their click flags while doing so, so the gate re-asserts
its state after every redraw.
"""

from __future__ import annotations

from dataclasses import dataclass

from orbgate.config import CONFIG_GROUP, ConfigManager
from orbgate.core.events import ConfigChanged, ScriptPostFired
from orbgate.core.state import GateState, OrbState
from orbgate.host.api import (
    EQUIPMENT_CONTAINER_ID,
    MINIMAP_GROUP_ID,
    SPECIAL_ATTACK_ITEM_ENUM_ID,
    UPDATE_HITPOINTS_ORB_SCRIPT_ID,
    UPDATE_SPEC_ORB_SCRIPT_ID,
    VARBIT_PARASITE,
    VARP_DISEASE,
    VARP_POISON,
    Client,
    GameState,
    Widget,
)
from orbgate.host.client_thread import ClientThread
from orbgate.logging import get_logger


@dataclass(slots=True, frozen=True)
class PluginDescriptor:
    name: str
    description: str
    tags: tuple[str, ...] = ()


DESCRIPTOR = PluginDescriptor(
    name="Block orbs",
    description="Prevent clicks from happening when clicking the minimap orbs.",
    tags=("minimap", "status", "orb", "click", "walk", "here"),
)


class OrbGatePlugin:
    descriptor = DESCRIPTOR

    def __init__(
        self,
        client: Client,
        client_thread: ClientThread,
        config_manager: ConfigManager,
        group: str = CONFIG_GROUP,
    ) -> None:
        self.client = client
        self.client_thread = client_thread
        self.config_manager = config_manager
        self.group = group
        self.state = GateState()
        self.logger = get_logger("orb-gate")

    @property
    def consume_hitpoints_orb(self) -> bool:
        return self.state.hitpoints.consume

    @property
    def consume_spec_orb(self) -> bool:
        return self.state.spec.consume

    def start_up(self) -> None:
        self._refresh_flags()

        if self.client.game_state is not GameState.LOGGED_IN:
            self.logger.debug("Not logged in, deferring orb setup")
            return

        def setup() -> None:
            self._resolve(self.state.hitpoints, force=True)
            self._resolve(self.state.spec, force=True)

            if not self.client.is_resized():
                return

            self.set_spec_orb_consuming(self.consume_spec_orb)
            self.set_hitpoints_orb_consuming(self.consume_hitpoints_orb)

        self.client_thread.invoke_later(setup)
        self.logger.info("Orb gate started")

    def shut_down(self) -> None:
        if self.client.game_state is not GameState.LOGGED_IN:
            return

        def restore() -> None:
            self.set_spec_orb_consuming(False)
            self.set_hitpoints_orb_consuming(False)

        self.client_thread.invoke_later(restore)
        self.logger.info("Orb gate stopped")

    def on_config_changed(self, event: ConfigChanged) -> None:
        if event.group.lower() != self.group.lower():
            return

        self._refresh_flags()
        self.logger.debug("Config {} changed to {}", event.key, event.new_value)

        def reapply() -> None:
            if not self.client.is_resized():
                return

            self.set_spec_orb_consuming(self.consume_spec_orb)
            self.set_hitpoints_orb_consuming(self.consume_hitpoints_orb)

        self.client_thread.invoke_later(reapply)

    def on_script_post_fired(self, event: ScriptPostFired) -> None:
        if not self.client.is_resized():
            return

        if event.script_id == UPDATE_HITPOINTS_ORB_SCRIPT_ID:
            if self._is_permeable(self.state.hitpoints):
                self.set_hitpoints_orb_consuming(self.consume_hitpoints_orb)
        elif event.script_id == UPDATE_SPEC_ORB_SCRIPT_ID:
            if self._is_permeable(self.state.spec):
                self.set_spec_orb_consuming(self.consume_spec_orb)

    def has_special_attack_item(self) -> bool:
        container = self.client.get_item_container(EQUIPMENT_CONTAINER_ID)
        special_items = self.client.get_enum(SPECIAL_ATTACK_ITEM_ENUM_ID)
        if container is None or special_items is None:
            return False

        keys = set(special_items.get_keys())
        return any(item is not None and item.id in keys for item in container.get_items())

    def is_debilitated(self) -> bool:
        return (
            self.client.get_varp_value(VARP_DISEASE) > 0
            or self.client.get_varp_value(VARP_POISON) > 0
            or self.client.get_varbit_value(VARBIT_PARASITE) > 0
        )

    def set_spec_orb_consuming(self, consume: bool) -> None:
        widget = self.state.spec.widget
        if widget is None:
            return

        if consume:
            # Follows the stored flag rather than ``consume``.
            widget.set_blocks_click_through(self.consume_spec_orb)
            widget.set_hidden(False)
        else:
            # Click blocking is left as-is here.
            widget.set_hidden(not self.has_special_attack_item())

    def set_hitpoints_orb_consuming(self, consume: bool) -> None:
        widget = self.state.hitpoints.widget
        if widget is None:
            return

        debilitated = self.is_debilitated()

        if consume:
            widget.set_blocks_click_through(True)
            widget.set_hidden(False)
        else:
            # Shown only while the orb's click-to-cure action is useful.
            widget.set_blocks_click_through(debilitated)
            widget.set_hidden(not debilitated)

    def _refresh_flags(self) -> None:
        config = self.config_manager.get_config()
        self.state.hitpoints.consume = config.block_hitpoints_orb
        self.state.spec.consume = config.block_special_attack_orb

    def _resolve(self, orb: OrbState, force: bool = False) -> Widget | None:
        if force or orb.widget is None:
            orb.widget = self.client.get_widget(MINIMAP_GROUP_ID, orb.child_id)
        return orb.widget

    def _is_permeable(self, orb: OrbState) -> bool:
        widget = self._resolve(orb)
        if widget is None:
            return False
        return widget.is_hidden() or not widget.blocks_click_through()
