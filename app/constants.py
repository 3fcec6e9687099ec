# app/constants.py
"""Identifier formats and user-facing messages for waste collection logs."""

import re

ZONE_ID_REGEX = r"^Z[0-9]{3}$"
VEHICLE_ID_REGEX = r"^(RT|PT)[0-9]{3}$"
WORKER_ID_REGEX = r"^W[0-9]{3}$"

ZONE_ID_PATTERN = re.compile(ZONE_ID_REGEX)
VEHICLE_ID_PATTERN = re.compile(VEHICLE_ID_REGEX)
WORKER_ID_PATTERN = re.compile(WORKER_ID_REGEX)

SYSTEM_USER = "System"

# ── Messages ────────────────────────────────────────────────────────────────
LOG_RECORDED = "Waste Collection Log Recorded Successfully"
LOG_COMPLETED = "Waste Collection Log Completed Successfully"
LOG_NOT_FOUND = "Waste Log Not Found With Id {log_id}"
LOG_ALREADY_COMPLETED = "Waste Log with ID {log_id} has already been completed."
ACTIVE_LOG_EXISTS = (
    "An active waste collection log already exists for worker {worker_id}, "
    "zone {zone_id} and vehicle {vehicle_id}."
)
END_BEFORE_START = "Collection End Time cannot be before start time."
START_AFTER_END_DATE = "Start date cannot be after end date."
INVALID_ZONE_ID = "Invalid Zone ID format. Must be like Z001."
INVALID_VEHICLE_ID = "Invalid Vehicle ID format. Must be like RT123 or PT123."
INVALID_WORKER_ID = "Invalid Worker ID format. Must be like W456."
INVALID_WEIGHT = "Weight Collected must be a positive value."

ZONE_REPORT_GENERATED = "Zone report generated successfully."
VEHICLE_REPORT_GENERATED = "Vehicle report generated successfully."
NO_COMPLETED_LOGS_ZONE = "No active completed logs found for zone ID: {zone_id} between {start} and {end}."
NO_COMPLETED_LOGS_VEHICLE = "No active completed logs found for vehicle ID: {vehicle_id} in the period {start} to {end}."

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."
