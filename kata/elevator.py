"""Event values for an elevator controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

Floor = int


class Direction(enum.Enum):
    """Which way a passenger wants to travel."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class LobbyCall:
    """Call button outside the car, pressed on ``floor`` for ``direction``."""

    direction: Direction
    floor: Floor


@dataclass(frozen=True)
class CarFloor:
    """Destination button inside the car for ``floor``."""

    floor: Floor


Button = Union[LobbyCall, CarFloor]


@dataclass(frozen=True)
class ButtonPressed:
    """Someone pushed ``button``."""

    button: Button


@dataclass(frozen=True)
class CarArrived:
    """The car stopped at ``floor``."""

    floor: Floor


@dataclass(frozen=True)
class CarDoorOpened:
    """Doors finished opening."""


@dataclass(frozen=True)
class CarDoorClosed:
    """Doors finished closing."""


Event = Union[ButtonPressed, CarArrived, CarDoorOpened, CarDoorClosed]


def car_arrived(floor: Floor) -> CarArrived:
    """Build the event for the car reaching ``floor``."""
    return CarArrived(floor=floor)


def car_door_opened() -> CarDoorOpened:
    """Build the event for the doors opening."""
    return CarDoorOpened()


def car_door_closed() -> CarDoorClosed:
    """Build the event for the doors closing."""
    return CarDoorClosed()


def lobby_call_button_pressed(floor: Floor, direction: Direction) -> ButtonPressed:
    """Build the event for a lobby call on ``floor`` heading ``direction``."""
    return ButtonPressed(button=LobbyCall(direction=direction, floor=floor))


def car_floor_button_pressed(floor: Floor) -> ButtonPressed:
    """Build the event for a destination button inside the car."""
    return ButtonPressed(button=CarFloor(floor=floor))