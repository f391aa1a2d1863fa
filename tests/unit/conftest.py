"""Shared fixtures: a small, deterministic car inventory."""

from __future__ import annotations

import pytest

from car_inventory.domain import Car, Manufacturer, Segment

TOYOTA = Manufacturer(id=1, name="Toyota", country="JP")
BMW = Manufacturer(id=2, name="BMW", country="DE")
FIAT = Manufacturer(id=3, name="Fiat", country="IT")


def make_cars() -> list[Car]:
    return [
        Car(id=1, model="RAV4", price=15000.0, sales=120, segment=Segment.SUV, manufacturer=TOYOTA),
        Car(id=2, model="Corolla", price=12000.0, sales=300, segment=Segment.MEDIUM, manufacturer=TOYOTA),
        Car(id=3, model="X5", price=55000.0, sales=80, segment=Segment.SUV, manufacturer=BMW),
        Car(id=4, model="X1", price=20000.0, sales=120, segment=Segment.SUV, manufacturer=BMW),
        Car(id=5, model="Panda", price=9000.0, sales=450, segment=Segment.MINI, manufacturer=FIAT),
        Car(id=6, model="500X", price=10000.0, sales=60, segment=Segment.SUV, manufacturer=FIAT),
        Car(id=7, model="Land Cruiser", price=48000.0, sales=15, segment=Segment.SUV, manufacturer=TOYOTA),
        Car(id=8, model="M3", price=70000.0, sales=25, segment=Segment.SPORT, manufacturer=BMW),
    ]


@pytest.fixture
def cars() -> list[Car]:
    return make_cars()
