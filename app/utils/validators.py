# app/utils/validators.py
"""
Identifier and value checks repeated inside the services.
The API layer validates the same rules first; these guard direct callers.
"""

import math
from datetime import date
from app import constants
from app.exceptions import InvalidInput, InvalidDateRange


def _check(value, pattern, message):
    if not isinstance(value, str) or not pattern.fullmatch(value):
        raise InvalidInput(f"{message} Got: {value!r}")


def validate_zone_id(zone_id):
    _check(zone_id, constants.ZONE_ID_PATTERN, constants.INVALID_ZONE_ID)


def validate_vehicle_id(vehicle_id):
    _check(vehicle_id, constants.VEHICLE_ID_PATTERN, constants.INVALID_VEHICLE_ID)


def validate_worker_id(worker_id):
    _check(worker_id, constants.WORKER_ID_PATTERN, constants.INVALID_WORKER_ID)


def _is_finite(number) -> bool:
    try:
        return math.isfinite(number)
    except OverflowError:
        # ints beyond float range
        return False


def validate_weight(weight):
    is_number = isinstance(weight, (int, float)) and not isinstance(weight, bool)
    if not is_number or not _is_finite(weight) or not weight > 0:
        raise InvalidInput(f"{constants.INVALID_WEIGHT} Got: {weight!r}")


def validate_date_range(start_date: date, end_date: date):
    if start_date > end_date:
        raise InvalidDateRange()
