"""In-process stand-ins for the host client, used by the CLI and tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from orbgate.host.api import (
    EQUIPMENT_CONTAINER_ID,
    HITPOINTS_ORB_CLICKABLE_CHILD_ID,
    MINIMAP_GROUP_ID,
    SPEC_ORB_CLICKABLE_CHILD_ID,
    SPECIAL_ATTACK_ITEM_ENUM_ID,
    VARBIT_PARASITE,
    VARP_DISEASE,
    VARP_POISON,
    GameState,
)

# A handful of enum 906 keys: dragon dagger, dragon dagger(p), granite maul,
# dragon claws, armadyl godsword.
DEFAULT_SPECIAL_ATTACK_ITEMS = (1215, 1231, 4153, 13652, 11802)


@dataclass(slots=True)
class SimItem:
    id: int
    quantity: int = 1


@dataclass(slots=True)
class SimItemContainer:
    items: list[SimItem | None] = field(default_factory=list)

    def get_items(self) -> Sequence[SimItem | None]:
        return self.items


@dataclass(slots=True)
class SimEnum:
    keys: tuple[int, ...] = ()

    def get_keys(self) -> Sequence[int]:
        return self.keys


@dataclass(slots=True)
class SimWidget:
    widget_id: int
    hidden: bool = False
    no_click_through: bool = False

    def is_hidden(self) -> bool:
        return self.hidden

    def set_hidden(self, hidden: bool) -> None:
        self.hidden = hidden

    def blocks_click_through(self) -> bool:
        return self.no_click_through

    def set_blocks_click_through(self, blocks: bool) -> None:
        self.no_click_through = blocks


class SimClient:
    """Minimal mutable client: widgets, equipment, varps and varbits."""

    def __init__(
        self,
        game_state: GameState = GameState.LOGGED_IN,
        resized: bool = True,
        special_attack_items: Sequence[int] = DEFAULT_SPECIAL_ATTACK_ITEMS,
    ) -> None:
        self._game_state = game_state
        self.resized = resized
        self.widgets: dict[tuple[int, int], SimWidget] = {}
        self.containers: dict[int, SimItemContainer] = {
            EQUIPMENT_CONTAINER_ID: SimItemContainer(),
        }
        self.enums: dict[int, SimEnum] = {
            SPECIAL_ATTACK_ITEM_ENUM_ID: SimEnum(tuple(special_attack_items)),
        }
        self.varps: dict[int, int] = {}
        self.varbits: dict[int, int] = {}
        self.widget_lookups = 0
        if resized:
            self.build_minimap()

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @game_state.setter
    def game_state(self, state: GameState) -> None:
        self._game_state = state

    def build_minimap(self) -> None:
        """Create the resized-layout orb widgets in their default state."""
        for child_id in (HITPOINTS_ORB_CLICKABLE_CHILD_ID, SPEC_ORB_CLICKABLE_CHILD_ID):
            self.widgets[(MINIMAP_GROUP_ID, child_id)] = SimWidget(
                widget_id=(MINIMAP_GROUP_ID << 16) | child_id,
                hidden=True,
            )

    def is_resized(self) -> bool:
        return self.resized

    def get_widget(self, group_id: int, child_id: int) -> SimWidget | None:
        self.widget_lookups += 1
        return self.widgets.get((group_id, child_id))

    def get_item_container(self, container_id: int) -> SimItemContainer | None:
        return self.containers.get(container_id)

    def get_enum(self, enum_id: int) -> SimEnum | None:
        return self.enums.get(enum_id)

    def get_varp_value(self, varp: int) -> int:
        return self.varps.get(varp, 0)

    def get_varbit_value(self, varbit: int) -> int:
        return self.varbits.get(varbit, 0)

    # Convenience mutators for driving scenarios.

    def equip(self, *item_ids: int) -> None:
        self.containers[EQUIPMENT_CONTAINER_ID].items = [SimItem(i) for i in item_ids]

    def set_poisoned(self, amount: int = 1) -> None:
        self.varps[VARP_POISON] = amount

    def set_diseased(self, amount: int = 1) -> None:
        self.varps[VARP_DISEASE] = amount

    def set_parasite(self, infected: bool = True) -> None:
        self.varbits[VARBIT_PARASITE] = int(infected)

    def cure(self) -> None:
        self.varps.pop(VARP_POISON, None)
        self.varps.pop(VARP_DISEASE, None)
        self.varbits.pop(VARBIT_PARASITE, None)

    def minimap_widget(self, child_id: int) -> SimWidget | None:
        return self.widgets.get((MINIMAP_GROUP_ID, child_id))
