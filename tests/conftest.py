import pytest

from src.taxi_park import Driver, Passenger, TaxiPark, Trip


def _drivers(*indices):
    return [Driver(f"D-{i}") for i in indices]


def _passengers(*indices):
    return [Passenger(f"P-{i}") for i in indices]


def _trip(driver: int, riders: list, duration: int = 10, cost: float = 3.0, discount=None) -> Trip:
    return Trip(
        driver=Driver(f"D-{driver}"),
        passengers=tuple(Passenger(f"P-{i}") for i in riders),
        duration=duration,
        cost=cost,
        discount=discount,
    )


@pytest.fixture
def empty_park():
    """Three drivers, two passengers, no trips at all."""
    return TaxiPark(_drivers(1, 2, 3), _passengers(1, 2), [])


@pytest.fixture
def small_park():
    """
    A park mimicking the course fixtures:
    - D-3 never drives
    - P-1 rides with D-1 three times, P-2 twice, P-3 once
    - P-4 never rides
    """
    return TaxiPark(
        _drivers(1, 2, 3),
        _passengers(1, 2, 3, 4),
        [
            _trip(1, [1, 2], duration=12, cost=20.0, discount=0.1),
            _trip(1, [1], duration=15, cost=15.0, discount=0.2),
            _trip(1, [1, 2, 3], duration=8, cost=30.0),
            _trip(2, [2], duration=31, cost=10.0, discount=0.4),
            _trip(2, [3, 3], duration=19, cost=5.0),
        ],
    )


@pytest.fixture
def pareto_park():
    """Five drivers, D-1 alone brings 90% of the income."""
    return TaxiPark(
        _drivers(1, 2, 3, 4, 5),
        _passengers(1),
        [
            _trip(1, [1], cost=50.0),
            _trip(1, [1], cost=40.0),
            _trip(2, [1], cost=6.0),
            _trip(3, [1], cost=4.0),
        ],
    )


@pytest.fixture
def make_drivers():
    """Builds Driver("D-<i>") for each index."""
    return _drivers


@pytest.fixture
def make_passengers():
    """Builds Passenger("P-<i>") for each index."""
    return _passengers


@pytest.fixture
def make_trip():
    """Builds a Trip from driver/passenger indices."""
    return _trip
