"""Domain models for the taxi park dataset."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True, order=True)
class Driver:
    name: str


@dataclass(frozen=True, order=True)
class Passenger:
    name: str


@dataclass(frozen=True)
class Trip:
    """A single ride: one driver, one or more passengers."""

    driver: Driver
    passengers: Tuple[Passenger, ...]
    duration: int
    cost: float
    discount: Optional[float] = None

    @property
    def discounted(self) -> bool:
        return self.discount is not None


@dataclass(frozen=True)
class TaxiPark:
    """
    Aggregate root handed to every query.

    Every driver/passenger referenced by a trip is expected to belong to
    all_drivers/all_passengers. Queries assume it, ParkValidator checks it.
    """

    all_drivers: FrozenSet[Driver]
    all_passengers: FrozenSet[Passenger]
    trips: Tuple[Trip, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable from callers, store immutable copies.
        object.__setattr__(self, "all_drivers", frozenset(self.all_drivers))
        object.__setattr__(self, "all_passengers", frozenset(self.all_passengers))
        object.__setattr__(self, "trips", tuple(self.trips))
