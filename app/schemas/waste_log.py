# app/schemas/waste_log.py
from pydantic import Field
from datetime import datetime
from app.constants import ZONE_ID_REGEX, VEHICLE_ID_REGEX, WORKER_ID_REGEX
from app.schemas.common import CamelModel


class WasteLogStartRequest(CamelModel):
    zone_id: str = Field(..., pattern=ZONE_ID_REGEX, description="Zone, e.g. Z001")
    vehicle_id: str = Field(..., pattern=VEHICLE_ID_REGEX, description="Vehicle, e.g. RT001 or PT001")
    worker_id: str = Field(..., pattern=WORKER_ID_REGEX, description="Worker, e.g. W001")


class WasteLogEndRequest(CamelModel):
    log_id: int = Field(..., gt=0)
    weight_collected: float = Field(..., gt=0, allow_inf_nan=False, description="Kilograms collected")


class WasteLogStartOut(CamelModel):
    log_id: int
    zone_id: str
    vehicle_id: str
    worker_id: str
    collection_start_time: datetime


class WasteLogEndOut(CamelModel):
    log_id: int
    collection_start_time: datetime
    collection_end_time: datetime
    weight_collected: float
