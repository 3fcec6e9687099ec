# app/schemas/report.py
from datetime import date
from app.schemas.common import CamelModel


class ZoneReportOut(CamelModel):
    zone_id: str
    date: date
    vehicle_count: int
    total_weight: float


class VehicleReportOut(CamelModel):
    vehicle_id: str
    zone_id: str
    weight: float
    collection_date: date
