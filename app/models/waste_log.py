# app/models/waste_log.py
"""
Waste collection log table.
One row per collection trip: opened by start_collection, closed once by
end_collection with the measured weight. Rows are never deleted here.
"""

from sqlalchemy import Column, Integer, String, DateTime, Float, Index, text
from app.database import Base

ACTIVE_ONLY = text("collection_end_time IS NULL")


class WasteLog(Base):
    __tablename__ = "waste_log"
    __table_args__ = (
        # At most one open log per worker/zone/vehicle triple
        Index(
            "uq_waste_log_active_triple",
            "worker_id", "zone_id", "vehicle_id",
            unique=True,
            postgresql_where=ACTIVE_ONLY,
            sqlite_where=ACTIVE_ONLY,
        ),
    )

    log_id = Column(Integer, primary_key=True, autoincrement=True)
    zone_id = Column(String(10), nullable=False, index=True)
    vehicle_id = Column(String(10), nullable=False, index=True)
    worker_id = Column(String(10), nullable=False)
    collection_start_time = Column(DateTime, nullable=False, index=True)
    collection_end_time = Column(DateTime)       # null while active
    weight_collected = Column(Float)             # kg, set on completion
    created_date = Column(DateTime, nullable=False)
    created_by = Column(String(50))
    updated_date = Column(DateTime, nullable=False)
    updated_by = Column(String(50))

    @property
    def is_active(self) -> bool:
        return self.collection_end_time is None

    def __repr__(self):
        state = "active" if self.is_active else "completed"
        return f"<WasteLog {self.log_id} zone={self.zone_id} vehicle={self.vehicle_id} {state}>"
