# app/services/log_store.py
"""
Data access for the waste_log table.
Used by waste_log_service (lifecycle) and report_service (reports).
Functions flush but never commit; the calling service owns the transaction.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.waste_log import WasteLog


def create_log(db: Session, log: WasteLog) -> WasteLog:
    """Stage a new log and flush so the database assigns log_id."""
    db.add(log)
    db.flush()
    return log


def find_log_by_id(db: Session, log_id: int, for_update: bool = False) -> Optional[WasteLog]:
    """Look up a log by id. for_update takes a row lock (ignored by SQLite)."""
    q = db.query(WasteLog).filter(WasteLog.log_id == log_id)
    if for_update:
        q = q.with_for_update()
    return q.first()


def find_active_log(db: Session, worker_id: str, zone_id: str, vehicle_id: str) -> Optional[WasteLog]:
    return db.query(WasteLog).filter(
        WasteLog.worker_id == worker_id,
        WasteLog.zone_id == zone_id,
        WasteLog.vehicle_id == vehicle_id,
        WasteLog.collection_end_time == None,  # noqa: E711
    ).first()


def find_logs_by_zone_between(db: Session, zone_id: str, start: datetime, end: datetime) -> list[WasteLog]:
    """All logs for a zone whose start time falls in [start, end]."""
    return (
        db.query(WasteLog)
        .filter(
            WasteLog.zone_id == zone_id,
            WasteLog.collection_start_time.between(start, end),
        )
        .order_by(WasteLog.collection_start_time.asc())
        .all()
    )


def find_logs_by_vehicle_between(db: Session, vehicle_id: str, start: datetime, end: datetime) -> list[WasteLog]:
    """All logs for a vehicle whose start time falls in [start, end]."""
    return (
        db.query(WasteLog)
        .filter(
            WasteLog.vehicle_id == vehicle_id,
            WasteLog.collection_start_time.between(start, end),
        )
        .order_by(WasteLog.collection_start_time.asc())
        .all()
    )
