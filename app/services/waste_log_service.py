# app/services/waste_log_service.py
"""
Waste log lifecycle: Active → Completed.

  - start_collection opens a log for a worker/zone/vehicle triple. Only one
    open log per triple; the partial unique index on waste_log backs the
    check when two starts race.
  - end_collection closes a log exactly once, stamping end time and weight.
    The row is locked for the read-then-write so concurrent ends serialize.

Audit columns (created_*/updated_*) are assigned here, not by ORM hooks.
"""

from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.constants import SYSTEM_USER
from app.exceptions import ActiveLogExists, LogNotFound, LogAlreadyCompleted, InvalidTimeRange
from app.models.waste_log import WasteLog
from app.services.log_store import create_log, find_active_log, find_log_by_id
from app.utils.validators import validate_zone_id, validate_vehicle_id, validate_worker_id, validate_weight
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _now() -> datetime:
    return datetime.now()


def start_collection(db: Session, zone_id: str, vehicle_id: str, worker_id: str) -> WasteLog:
    """Open a new collection log. Raises ActiveLogExists if the triple already has one."""
    validate_zone_id(zone_id)
    validate_vehicle_id(vehicle_id)
    validate_worker_id(worker_id)
    logger.info(f"Starting collection: zone={zone_id} vehicle={vehicle_id} worker={worker_id}")

    if find_active_log(db, worker_id, zone_id, vehicle_id):
        logger.warning(f"Active log already open for worker={worker_id} zone={zone_id} vehicle={vehicle_id}")
        raise ActiveLogExists(zone_id, vehicle_id, worker_id)

    now = _now()
    log = WasteLog(
        zone_id=zone_id,
        vehicle_id=vehicle_id,
        worker_id=worker_id,
        collection_start_time=now,
        collection_end_time=None,
        weight_collected=None,
        created_date=now,
        created_by=SYSTEM_USER,
        updated_date=now,
        updated_by=SYSTEM_USER,
    )
    try:
        create_log(db, log)
        db.commit()
    except IntegrityError:
        # Lost the race to a concurrent start for the same triple
        db.rollback()
        logger.warning(f"Concurrent start rejected for worker={worker_id} zone={zone_id} vehicle={vehicle_id}")
        raise ActiveLogExists(zone_id, vehicle_id, worker_id)

    logger.info(f"Waste collection log {log.log_id} started")
    return log


def end_collection(db: Session, log_id: int, weight_collected: float) -> WasteLog:
    """Close an active log with its measured weight. Not idempotent."""
    validate_weight(weight_collected)
    logger.info(f"Completing waste collection log {log_id}")

    log = find_log_by_id(db, log_id, for_update=True)
    if log is None:
        db.rollback()
        logger.warning(f"Waste log {log_id} not found")
        raise LogNotFound(log_id)

    if log.collection_end_time is not None:
        db.rollback()
        logger.warning(f"Attempted to complete already completed log {log_id}")
        raise LogAlreadyCompleted(log_id)

    end_time = _now()
    if end_time < log.collection_start_time:
        db.rollback()
        logger.warning(
            f"Invalid end time for log {log_id}: end {end_time} is before start {log.collection_start_time}"
        )
        raise InvalidTimeRange()

    log.collection_end_time = end_time
    log.weight_collected = float(weight_collected)
    log.updated_date = end_time
    log.updated_by = SYSTEM_USER
    db.commit()

    logger.info(f"Waste collection log {log_id} completed: {weight_collected} kg")
    return log
