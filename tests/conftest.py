import pytest

from car_diagnostics.models import REQUIRED_PARTS, Car, ConditionType, Part


def build_parts(condition=ConditionType.GOOD, **overrides):
    """One part per required type; keyword overrides set a type's condition by name."""
    return [
        Part(type=t, condition=ConditionType[overrides.get(t.name, condition.name)])
        for t in REQUIRED_PARTS
    ]


@pytest.fixture
def complete_car():
    return Car(make="Honda", model="Civic", year="2020", parts=build_parts())
