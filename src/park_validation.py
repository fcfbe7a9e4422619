import logging

import pandas as pd
import great_expectations as gx
import great_expectations.expectations as gxe
from great_expectations.core.expectation_suite import ExpectationSuite

import src.park_contract as pc
from src.taxi_park import TaxiPark
from src.trip_frames import build_rides_frame, build_trips_frame

logger = logging.getLogger(__name__)


class ParkValidator:
    """
    Checks that a TaxiPark honours its data-model invariants.

    The queries never enforce these; callers run this before querying
    data they did not build themselves.
    """

    def __init__(self, park: TaxiPark):
        self.park = park
        # Ephemeral Context: In-memory configuration, nothing written to disk.
        self.context = gx.get_context(mode="ephemeral")
        self.datasource_name = "taxi_park_datasource"
        self.validation_results = {}

    def _get_asset(self, asset_name: str):
        try:
            ds = self.context.data_sources.get(self.datasource_name)
        except KeyError:
            ds = self.context.data_sources.add_pandas(self.datasource_name)

        try:
            return ds.get_asset(asset_name)
        except LookupError:
            return ds.add_dataframe_asset(name=asset_name)

    def _run_suite(self, asset_name: str, df: pd.DataFrame, suite: ExpectationSuite):
        asset = self._get_asset(asset_name)
        batch_def_name = f"{asset_name}_whole_df"
        try:
            batch_def = asset.get_batch_definition(batch_def_name)
        except LookupError:
            batch_def = asset.add_batch_definition_whole_dataframe(batch_def_name)
        batch = batch_def.get_batch(batch_parameters={"dataframe": df})
        results = batch.validate(suite)
        self.validation_results[asset_name] = results
        return results

    def _trips_suite(self) -> ExpectationSuite:
        suite = ExpectationSuite(name="taxi_park_trips_suite")

        # --- Rule A: Structural Integrity ---
        for col in pc.TRIP_COLUMNS:
            suite.add_expectation(gxe.ExpectColumnToExist(column=col))

        # --- Rule B: Referential Integrity ---
        suite.add_expectation(
            gxe.ExpectColumnValuesToBeInSet(
                column="driver",
                value_set=sorted(d.name for d in self.park.all_drivers),
            )
        )

        # --- Rule C: Semantic Domains ---
        suite.add_expectation(
            gxe.ExpectColumnValuesToBeBetween(column="duration", min_value=pc.DURATION_MIN)
        )
        suite.add_expectation(
            gxe.ExpectColumnValuesToBeBetween(column="cost", min_value=pc.COST_MIN)
        )
        suite.add_expectation(
            gxe.ExpectColumnValuesToBeBetween(
                column="passenger_count", min_value=pc.PASSENGER_COUNT_MIN
            )
        )
        return suite

    def _rides_suite(self) -> ExpectationSuite:
        suite = ExpectationSuite(name="taxi_park_rides_suite")
        for col in pc.RIDE_COLUMNS:
            suite.add_expectation(gxe.ExpectColumnToExist(column=col))
        suite.add_expectation(
            gxe.ExpectColumnValuesToBeInSet(
                column="passenger",
                value_set=sorted(p.name for p in self.park.all_passengers),
            )
        )
        return suite

    def validate(self) -> bool:
        if not self.park.trips:
            logger.info("Taxi park has no trips, nothing to validate.")
            return True

        logger.info(f"Validating taxi park with Great Expectations ({len(self.park.trips)} trips)...")

        trips_results = self._run_suite("trips", build_trips_frame(self.park), self._trips_suite())
        rides_results = self._run_suite("rides", build_rides_frame(self.park), self._rides_suite())

        failed = False
        for results in (trips_results, rides_results):
            if results.success:
                continue
            failed = True
            for res in results.results:
                if not res.success:
                    col = res.expectation_config.kwargs.get("column", "Table-Level")
                    type_ = res.expectation_config.type
                    logger.error(f"   - Violation: {col} | Rule: {type_}")

        if failed:
            logger.error("Taxi park validation failed!")
            raise ValueError("Taxi park violates its data-model invariants.")

        logger.info("Taxi park validation passed.")
        return True
