# app/services/report_service.py
"""
Zone and vehicle reports over completed waste logs.

Zone report:    one row per calendar day (of collection start) with the
                number of distinct vehicles and the total weight collected.
Vehicle report: one row per completed trip, no aggregation.

Both return the full list ordered by date; paging is done by the router.
Active logs in the range are ignored. An empty list is a valid result.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, time
from sqlalchemy.orm import Session
from app.models.waste_log import WasteLog
from app.services.log_store import find_logs_by_zone_between, find_logs_by_vehicle_between
from app.utils.validators import validate_zone_id, validate_vehicle_id, validate_date_range
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ZoneReportRow:
    zone_id: str
    date: date
    vehicle_count: int     # distinct vehicles, not trips
    total_weight: float


@dataclass
class VehicleReportRow:
    vehicle_id: str
    zone_id: str
    weight: float
    collection_date: date


def _day_bounds(start_date: date, end_date: date) -> tuple[datetime, datetime]:
    return datetime.combine(start_date, time.min), datetime.combine(end_date, time.max)


def _completed(logs: list[WasteLog]) -> list[WasteLog]:
    return [log for log in logs if log.collection_end_time is not None and log.weight_collected is not None]


def zone_report(db: Session, zone_id: str, start_date: date, end_date: date) -> list[ZoneReportRow]:
    validate_zone_id(zone_id)
    validate_date_range(start_date, end_date)
    logger.info(f"Generating zone report for {zone_id} between {start_date} and {end_date}")

    start, end = _day_bounds(start_date, end_date)
    completed = _completed(find_logs_by_zone_between(db, zone_id, start, end))
    if not completed:
        logger.info(f"No completed logs for zone {zone_id} between {start_date} and {end_date}")
        return []

    weights = defaultdict(float)
    vehicles = defaultdict(set)
    for log in completed:
        day = log.collection_start_time.date()
        weights[day] += log.weight_collected
        vehicles[day].add(log.vehicle_id)

    rows = [
        ZoneReportRow(zone_id=zone_id, date=day, vehicle_count=len(vehicles[day]), total_weight=weights[day])
        for day in sorted(weights)
    ]
    logger.info(f"Zone report for {zone_id}: {len(rows)} day(s) from {len(completed)} completed log(s)")
    return rows


def vehicle_report(db: Session, vehicle_id: str, start_date: date, end_date: date) -> list[VehicleReportRow]:
    validate_vehicle_id(vehicle_id)
    validate_date_range(start_date, end_date)
    logger.info(f"Generating vehicle report for {vehicle_id} between {start_date} and {end_date}")

    start, end = _day_bounds(start_date, end_date)
    completed = _completed(find_logs_by_vehicle_between(db, vehicle_id, start, end))

    # stable sort keeps start-time order within a day
    rows = sorted(
        (
            VehicleReportRow(
                vehicle_id=log.vehicle_id,
                zone_id=log.zone_id,
                weight=log.weight_collected,
                collection_date=log.collection_start_time.date(),
            )
            for log in completed
        ),
        key=lambda r: r.collection_date,
    )
    logger.info(f"Vehicle report for {vehicle_id}: {len(rows)} trip(s)")
    return rows
