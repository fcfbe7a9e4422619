import pytest

from src.park_validation import ParkValidator
from src.taxi_park import TaxiPark


def test_valid_park_passes(small_park):
    validator = ParkValidator(small_park)

    assert validator.validate() is True
    assert set(validator.validation_results) == {"trips", "rides"}


def test_validate_can_run_twice(small_park):
    validator = ParkValidator(small_park)

    assert validator.validate() is True
    assert validator.validate() is True
    assert validator.validation_results["trips"].success
    assert validator.validation_results["rides"].success


def test_park_without_trips_passes(empty_park):
    validator = ParkValidator(empty_park)

    assert validator.validate() is True
    assert validator.validation_results == {}


def test_unknown_driver_fails(make_drivers, make_passengers, make_trip):
    park = TaxiPark(make_drivers(1), make_passengers(1), [make_trip(1, [1]), make_trip(9, [1])])
    validator = ParkValidator(park)

    with pytest.raises(ValueError):
        validator.validate()
    assert not validator.validation_results["trips"].success


def test_unknown_passenger_fails(make_drivers, make_passengers, make_trip):
    park = TaxiPark(make_drivers(1), make_passengers(1), [make_trip(1, [1, 7])])
    validator = ParkValidator(park)

    with pytest.raises(ValueError):
        validator.validate()
    assert validator.validation_results["trips"].success
    assert not validator.validation_results["rides"].success


def test_negative_duration_fails(make_drivers, make_passengers, make_trip):
    park = TaxiPark(make_drivers(1), make_passengers(1), [make_trip(1, [1], duration=-4)])

    with pytest.raises(ValueError):
        ParkValidator(park).validate()
