"""Capabilities the host client exposes to plugins."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol

MINIMAP_GROUP_ID = 160
HITPOINTS_ORB_CLICKABLE_CHILD_ID = 8
SPEC_ORB_CLICKABLE_CHILD_ID = 35

UPDATE_HITPOINTS_ORB_SCRIPT_ID = 446
UPDATE_SPEC_ORB_SCRIPT_ID = 2792

EQUIPMENT_CONTAINER_ID = 94

# Enum 906 maps every special attack weapon to the energy it costs.
SPECIAL_ATTACK_ITEM_ENUM_ID = 906

VARP_POISON = 102
VARP_DISEASE = 456
VARBIT_PARASITE = 10151


class GameState(Enum):
    UNKNOWN = -1
    STARTING = 0
    LOGIN_SCREEN = 10
    LOGGING_IN = 20
    LOADING = 25
    LOGGED_IN = 30
    CONNECTION_LOST = 40
    HOPPING = 45


class Widget(Protocol):
    def is_hidden(self) -> bool: ...

    def set_hidden(self, hidden: bool) -> None: ...

    def blocks_click_through(self) -> bool: ...

    def set_blocks_click_through(self, blocks: bool) -> None: ...


class Item(Protocol):
    id: int


class ItemContainer(Protocol):
    def get_items(self) -> Sequence[Item | None]: ...


class EnumComposition(Protocol):
    def get_keys(self) -> Sequence[int]: ...


class Client(Protocol):
    @property
    def game_state(self) -> GameState: ...

    def is_resized(self) -> bool: ...

    def get_widget(self, group_id: int, child_id: int) -> Widget | None: ...

    def get_item_container(self, container_id: int) -> ItemContainer | None: ...

    def get_enum(self, enum_id: int) -> EnumComposition | None: ...

    def get_varp_value(self, varp: int) -> int: ...

    def get_varbit_value(self, varbit: int) -> int: ...
