"""orbgate composition root."""

from __future__ import annotations

from dataclasses import dataclass

from orbgate.config import ConfigManager, OrbGateSettings
from orbgate.core.events import CONFIG_CHANGED, SCRIPT_POST_FIRED, EventBus
from orbgate.host.api import Client
from orbgate.host.client_thread import ClientThread
from orbgate.logging import get_logger
from orbgate.services.orb_gate import OrbGatePlugin


@dataclass(slots=True)
class GateContext:
    settings: OrbGateSettings
    events: EventBus
    client: Client
    client_thread: ClientThread
    config_manager: ConfigManager
    plugin: OrbGatePlugin

    def start(self) -> None:
        self.events.subscribe(CONFIG_CHANGED, self.plugin.on_config_changed)
        self.events.subscribe(SCRIPT_POST_FIRED, self.plugin.on_script_post_fired)
        self.plugin.start_up()

    def stop(self) -> None:
        self.plugin.shut_down()
        self.events.unsubscribe(CONFIG_CHANGED, self.plugin.on_config_changed)
        self.events.unsubscribe(SCRIPT_POST_FIRED, self.plugin.on_script_post_fired)


def build_context(
    settings: OrbGateSettings,
    client: Client,
    events: EventBus | None = None,
) -> GateContext:
    events = events or EventBus()
    client_thread = ClientThread()
    config_manager = ConfigManager(settings.orbs.model_copy(), events)
    plugin = OrbGatePlugin(client, client_thread, config_manager)

    logger = get_logger("bootstrap")
    logger.info("orbgate context ready")

    return GateContext(
        settings=settings,
        events=events,
        client=client,
        client_thread=client_thread,
        config_manager=config_manager,
        plugin=plugin,
    )
