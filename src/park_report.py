import logging

import mlflow
import yaml

import src.park_contract as pc
from src.park_queries import TaxiParkQueries
from src.taxi_park import TaxiPark

logger = logging.getLogger(__name__)


def load_params(params_path: str) -> dict:
    with open(params_path, "r") as f:
        return yaml.safe_load(f) or {}


def _names(items) -> list:
    return sorted(item.name for item in items)


class ParkReport:
    """Runs every taxi park query once and collects the answers."""

    def __init__(self, park: TaxiPark, params: dict | None = None):
        query_params = (params or {}).get("queries", {}) or {}
        pareto = query_params.get("pareto", {}) or {}

        self.park = park
        self.faithful_min_trips = int(query_params.get("faithful_min_trips", pc.FAITHFUL_MIN_TRIPS))
        self.queries = TaxiParkQueries(
            park,
            period_minutes=int(query_params.get("period_minutes", pc.PERIOD_MINUTES)),
            pareto_driver_share=float(pareto.get("driver_share", pc.PARETO_DRIVER_SHARE)),
            pareto_income_share=float(pareto.get("income_share", pc.PARETO_INCOME_SHARE)),
        )

    def build(self) -> dict:
        logger.info(
            f"Building report for {len(self.park.all_drivers)} drivers, "
            f"{len(self.park.all_passengers)} passengers, {len(self.park.trips)} trips"
        )

        frequent = {}
        for driver in sorted(self.park.all_drivers):
            passengers = self.queries.find_frequent_passengers(driver)
            if passengers:
                frequent[driver.name] = _names(passengers)

        period = self.queries.find_the_most_frequent_trip_duration_period()

        report = {
            "contract_version": pc.CONTRACT_VERSION,
            "drivers": len(self.park.all_drivers),
            "passengers": len(self.park.all_passengers),
            "trips": len(self.park.trips),
            "fake_drivers": _names(self.queries.find_fake_drivers()),
            "faithful_min_trips": self.faithful_min_trips,
            "faithful_passengers": _names(
                self.queries.find_faithful_passengers(self.faithful_min_trips)
            ),
            "frequent_passengers": frequent,
            "smart_passengers": _names(self.queries.find_smart_passengers()),
            "most_frequent_period": [period.start, period.stop - 1] if period else None,
            "pareto_principle": self.queries.check_pareto_principle(),
        }

        logger.info(f"Taxi park report: {report}")
        return report


def log_report_metrics(report: dict) -> None:
    """Record a report on the active MLflow run."""
    mlflow.log_param("contract_version", report["contract_version"])
    mlflow.log_param("faithful_min_trips", report["faithful_min_trips"])

    mlflow.log_metric("drivers", report["drivers"])
    mlflow.log_metric("passengers", report["passengers"])
    mlflow.log_metric("trips", report["trips"])
    mlflow.log_metric("fake_drivers", len(report["fake_drivers"]))
    mlflow.log_metric("faithful_passengers", len(report["faithful_passengers"]))
    mlflow.log_metric("smart_passengers", len(report["smart_passengers"]))

    period = report["most_frequent_period"]
    if period is not None:
        mlflow.log_metric("most_frequent_period_start", period[0])

    mlflow.set_tag("pareto_principle", "pass" if report["pareto_principle"] else "fail")


def record_report(park: TaxiPark, params: dict) -> dict:
    """Build a report and log it as one run of the configured experiment."""
    report = ParkReport(park, params).build()

    exp_name = (params.get("mlflow") or {}).get("experiment_name", "Taxi_Park_Reports")
    mlflow.set_experiment(exp_name)

    with mlflow.start_run() as run:
        logger.info(f"Starting Run: {run.info.run_id}")
        log_report_metrics(report)

    return report
