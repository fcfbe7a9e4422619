import logging
from typing import Optional, Set

import pandas as pd

import src.park_contract as pc
from src.taxi_park import Driver, Passenger, TaxiPark
from src.trip_frames import build_rides_frame, build_trips_frame

logger = logging.getLogger(__name__)


class TaxiParkQueries:
    """
    Read-only analytical queries over a single TaxiPark.

    Frames are built once in __init__; every query is a pure aggregation
    over them and never touches the park itself.
    """

    def __init__(
        self,
        park: TaxiPark,
        period_minutes: int = pc.PERIOD_MINUTES,
        pareto_driver_share: float = pc.PARETO_DRIVER_SHARE,
        pareto_income_share: float = pc.PARETO_INCOME_SHARE,
    ):
        if period_minutes <= 0:
            raise ValueError(f"period_minutes must be positive, got {period_minutes}")

        self.park = park
        self.period_minutes = period_minutes
        self.pareto_driver_share = pareto_driver_share
        self.pareto_income_share = pareto_income_share

        self.trips = build_trips_frame(park)
        self.rides = build_rides_frame(park)

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------
    def find_fake_drivers(self) -> Set[Driver]:
        """Drivers who performed no trips."""
        active = set(self.trips["driver"].unique())
        return {d for d in self.park.all_drivers if d.name not in active}

    def driver_income(self) -> pd.Series:
        """Total cost per driver name, highest first."""
        return (
            self.trips.groupby("driver", sort=False)["cost"]
            .sum()
            .sort_values(ascending=False)
        )

    def check_pareto_principle(self) -> bool:
        """Whether 20% of the drivers contribute 80% of the income."""
        if self.trips.empty:
            return False

        income = self.driver_income()
        threshold = income.sum() * self.pareto_income_share

        # Incomes are non-negative, so the running total is monotone and the
        # first driver reaching the threshold sits right after the ones below it.
        running = income.cumsum()
        drivers_needed = min(int((running < threshold).sum()) + 1, len(income))
        drivers_allowed = int(len(self.park.all_drivers) * self.pareto_driver_share)

        logger.info(
            f"Pareto check: {drivers_needed} driver(s) reach "
            f"{self.pareto_income_share:.0%} of income, allowed {drivers_allowed}"
        )
        return drivers_needed <= drivers_allowed

    # ------------------------------------------------------------------
    # Passengers
    # ------------------------------------------------------------------
    def find_faithful_passengers(self, min_trips: int) -> Set[Passenger]:
        """Passengers who completed at least min_trips trips."""
        counts = self.rides["passenger"].value_counts()
        return {p for p in self.park.all_passengers if counts.get(p.name, 0) >= min_trips}

    def find_frequent_passengers(self, driver: Driver) -> Set[Passenger]:
        """Passengers taken by the given driver more than once."""
        with_driver = self.rides[self.rides["driver"] == driver.name]
        counts = with_driver["passenger"].value_counts()
        frequent = set(counts[counts >= pc.FREQUENT_MIN_RIDES].index)
        return {p for p in self.park.all_passengers if p.name in frequent}

    def find_smart_passengers(self) -> Set[Passenger]:
        """Passengers who had a discount for the majority of their trips."""
        if self.rides.empty:
            return set()

        per_passenger = self.rides.groupby("passenger", sort=False)["discounted"].agg(
            ["sum", "count"]
        )
        discounted = per_passenger["sum"]
        full_price = per_passenger["count"] - discounted
        smart = set(per_passenger.index[discounted > full_price])
        return {p for p in self.park.all_passengers if p.name in smart}

    # ------------------------------------------------------------------
    # Trips
    # ------------------------------------------------------------------
    def find_the_most_frequent_trip_duration_period(self) -> Optional[range]:
        """
        Most frequent duration period among 0..9, 10..19, 20..29, ...

        The returned range excludes its stop, so range(10, 20) is 10..19.
        Any period may be returned if several are equally frequent, None if
        there are no trips.
        """
        if self.trips.empty:
            return None

        periods = self.trips["duration"] // self.period_minutes
        top = int(periods.value_counts().idxmax())
        start = top * self.period_minutes
        return range(start, start + self.period_minutes)
