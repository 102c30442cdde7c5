import dataclasses

import pytest

from kata.elevator import (
    ButtonPressed,
    CarArrived,
    CarDoorClosed,
    CarDoorOpened,
    CarFloor,
    Direction,
    LobbyCall,
    car_arrived,
    car_door_closed,
    car_door_opened,
    car_floor_button_pressed,
    lobby_call_button_pressed,
)


def test_lobby_call_button_pressed():
    event = lobby_call_button_pressed(0, Direction.UP)
    assert event == ButtonPressed(LobbyCall(Direction.UP, 0))
    assert event.button.direction is Direction.UP
    assert event.button.floor == 0


def test_lobby_call_direction_matters():
    assert lobby_call_button_pressed(2, Direction.UP) != lobby_call_button_pressed(
        2, Direction.DOWN
    )


def test_car_floor_button_pressed():
    event = car_floor_button_pressed(3)
    assert event == ButtonPressed(CarFloor(3))
    assert event.button.floor == 3


def test_car_arrived():
    assert car_arrived(0) == CarArrived(0)
    assert car_arrived(3).floor == 3
    assert car_arrived(3) != car_arrived(0)


def test_door_events():
    assert car_door_opened() == CarDoorOpened()
    assert car_door_closed() == CarDoorClosed()
    assert car_door_opened() != car_door_closed()


def test_lobby_and_car_buttons_differ():
    assert lobby_call_button_pressed(3, Direction.UP) != car_floor_button_pressed(3)


def test_events_are_immutable():
    event = car_arrived(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.floor = 2
    assert event.floor == 1
    assert event == CarArrived(1)