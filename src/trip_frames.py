import logging

import pandas as pd

import src.park_contract as pc
from src.taxi_park import TaxiPark

logger = logging.getLogger(__name__)


def build_trips_frame(park: TaxiPark) -> pd.DataFrame:
    """One row per trip, keyed by driver name."""
    records = [
        {
            "trip_id": trip_id,
            "driver": trip.driver.name,
            "passenger_count": len(set(trip.passengers)),
            "duration": trip.duration,
            "cost": trip.cost,
            "discount": trip.discount,
            "discounted": trip.discounted,
        }
        for trip_id, trip in enumerate(park.trips)
    ]

    df = pd.DataFrame(records, columns=pc.TRIP_COLUMNS)

    # Type enforcement (an empty frame would otherwise be all-object)
    df = df.astype(
        {
            "trip_id": "int64",
            "passenger_count": "int64",
            "duration": "int64",
            "cost": "float64",
            "discount": "float64",
            "discounted": "bool",
        }
    )

    logger.info(f"Built trips frame: {len(df)} rows")
    return df


def build_rides_frame(park: TaxiPark) -> pd.DataFrame:
    """
    One row per (trip, passenger).

    A passenger listed twice in the same trip still rides once.
    """
    records = [
        {
            "trip_id": trip_id,
            "driver": trip.driver.name,
            "passenger": passenger.name,
            "discounted": trip.discounted,
        }
        for trip_id, trip in enumerate(park.trips)
        for passenger in trip.passengers
    ]

    df = pd.DataFrame(records, columns=pc.RIDE_COLUMNS)
    df = df.drop_duplicates(subset=["trip_id", "passenger"], ignore_index=True)
    df = df.astype({"trip_id": "int64", "discounted": "bool"})

    logger.info(f"Built rides frame: {len(df)} rows")
    return df
