"""
src/park_contract.py

Single Source of Truth for Taxi Park Query Rules.
"""

# Versioning allows us to track which rules were active
# for a given report.
CONTRACT_VERSION = "1.0.0"

# -------------------------------------------------------------------
# Frame Schema
# -------------------------------------------------------------------
TRIP_COLUMNS = [
    "trip_id",
    "driver",
    "passenger_count",
    "duration",
    "cost",
    "discount",
    "discounted",
]

RIDE_COLUMNS = [
    "trip_id",
    "driver",
    "passenger",
    "discounted",
]


# -------------------------------------------------------------------
# Domain Rules (Inclusive Boundaries)
# -------------------------------------------------------------------
# A trip always carries at least one passenger.
PASSENGER_COUNT_MIN = 1

# Duration in minutes, cost in currency units. Never negative.
DURATION_MIN = 0
COST_MIN = 0.0


# -------------------------------------------------------------------
# Query Defaults
# -------------------------------------------------------------------
# Duration periods: 0..9, 10..19, 20..29, ...
PERIOD_MINUTES = 10

# A passenger is "frequent" for a driver above this many shared trips.
FREQUENT_MIN_RIDES = 2

# Default threshold for faithful passengers in reports.
FAITHFUL_MIN_TRIPS = 1

# Pareto: 20% of the drivers bring 80% of the income.
PARETO_DRIVER_SHARE = 0.2
PARETO_INCOME_SHARE = 0.8
