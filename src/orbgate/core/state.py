"""Runtime state containers."""

from __future__ import annotations

from dataclasses import dataclass, field

from orbgate.host.api import (
    HITPOINTS_ORB_CLICKABLE_CHILD_ID,
    SPEC_ORB_CLICKABLE_CHILD_ID,
    Widget,
)


@dataclass(slots=True)
class OrbState:
    child_id: int
    widget: Widget | None = None
    consume: bool = False


@dataclass(slots=True)
class GateState:
    hitpoints: OrbState = field(
        default_factory=lambda: OrbState(child_id=HITPOINTS_ORB_CLICKABLE_CHILD_ID)
    )
    spec: OrbState = field(
        default_factory=lambda: OrbState(child_id=SPEC_ORB_CLICKABLE_CHILD_ID)
    )
