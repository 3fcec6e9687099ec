# app/exceptions.py
"""
Business failures raised by the waste log services.

Routers never see these as HTTP errors directly: the handlers registered in
app.main render them using the http_status hint on each class.
"""

from app import constants


class WasteLogError(Exception):
    """Base class for expected business-rule failures."""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(WasteLogError):
    """Malformed identifier, non-positive weight, or other bad input."""

    http_status = 400


class InvalidTimeRange(InvalidInput):
    """Computed end time precedes the log's start time (clock anomaly)."""

    def __init__(self, message: str = constants.END_BEFORE_START):
        super().__init__(message)


class InvalidDateRange(InvalidInput):
    """Report start date is after its end date."""

    def __init__(self, message: str = constants.START_AFTER_END_DATE):
        super().__init__(message)


class ActiveLogExists(WasteLogError):
    http_status = 409

    def __init__(self, zone_id: str, vehicle_id: str, worker_id: str):
        super().__init__(constants.ACTIVE_LOG_EXISTS.format(
            zone_id=zone_id, vehicle_id=vehicle_id, worker_id=worker_id))
        self.zone_id = zone_id
        self.vehicle_id = vehicle_id
        self.worker_id = worker_id


class LogNotFound(WasteLogError):
    http_status = 404

    def __init__(self, log_id):
        super().__init__(constants.LOG_NOT_FOUND.format(log_id=log_id))
        self.log_id = log_id


class LogAlreadyCompleted(WasteLogError):
    """End was called on a log that is already in its terminal state."""

    http_status = 409

    def __init__(self, log_id):
        super().__init__(constants.LOG_ALREADY_COMPLETED.format(log_id=log_id))
        self.log_id = log_id
