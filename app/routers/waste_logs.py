# app/routers/waste_logs.py
"""
Waste collection log endpoints.
POST /start                        — open a collection log
PUT  /end                          — close it with the collected weight
GET  /reports/zone/{zone_id}       — daily totals per zone (paged)
GET  /reports/vehicle/{vehicle_id} — completed trips per vehicle (paged)

Business errors propagate to the handlers in app.main.
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from app import constants
from app.config import settings
from app.database import get_db
from app.schemas.common import RestResponse, Page
from app.schemas.report import ZoneReportOut, VehicleReportOut
from app.schemas.waste_log import WasteLogStartRequest, WasteLogEndRequest, WasteLogStartOut, WasteLogEndOut
from app.services import report_service, waste_log_service
from app.utils.pagination import paginate

router = APIRouter(prefix="/wastewise/admin/wastelogs")


def _page_size(size: Optional[int]) -> int:
    return size or settings.DEFAULT_PAGE_SIZE


@router.post(
    "/start",
    status_code=status.HTTP_201_CREATED,
    response_model=RestResponse[WasteLogStartOut],
    summary="Start a waste collection",
)
def start_collection(body: WasteLogStartRequest, db: Session = Depends(get_db)):
    """Opens a log for the zone/vehicle/worker. 409 if one is already open."""
    log = waste_log_service.start_collection(db, body.zone_id, body.vehicle_id, body.worker_id)
    return RestResponse(
        success=True,
        message=constants.LOG_RECORDED,
        data=WasteLogStartOut.model_validate(log),
    )


@router.put("/end", response_model=RestResponse[WasteLogEndOut], summary="End a waste collection")
def end_collection(body: WasteLogEndRequest, db: Session = Depends(get_db)):
    """Closes an open log. 404 for unknown ids, 409 if already completed."""
    log = waste_log_service.end_collection(db, body.log_id, body.weight_collected)
    return RestResponse(
        success=True,
        message=constants.LOG_COMPLETED,
        data=WasteLogEndOut.model_validate(log),
    )


@router.get(
    "/reports/zone/{zone_id}",
    response_model=RestResponse[Page[ZoneReportOut]],
    summary="Daily collection summary for a zone",
)
def get_zone_report(
    zone_id: str = Path(..., pattern=constants.ZONE_ID_REGEX),
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    """One row per day: distinct vehicles and total kg, oldest day first."""
    rows = report_service.zone_report(db, zone_id, start_date, end_date)
    result = paginate([ZoneReportOut.model_validate(r) for r in rows], page, _page_size(size))
    message = (
        constants.NO_COMPLETED_LOGS_ZONE.format(zone_id=zone_id, start=start_date, end=end_date)
        if not result.content else constants.ZONE_REPORT_GENERATED
    )
    return RestResponse(success=True, message=message, data=result)


@router.get(
    "/reports/vehicle/{vehicle_id}",
    response_model=RestResponse[Page[VehicleReportOut]],
    summary="Completed trips for a vehicle",
)
def get_vehicle_report(
    vehicle_id: str = Path(..., pattern=constants.VEHICLE_ID_REGEX),
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    rows = report_service.vehicle_report(db, vehicle_id, start_date, end_date)
    result = paginate([VehicleReportOut.model_validate(r) for r in rows], page, _page_size(size))
    message = (
        constants.NO_COMPLETED_LOGS_VEHICLE.format(vehicle_id=vehicle_id, start=start_date, end=end_date)
        if not result.content else constants.VEHICLE_REPORT_GENERATED
    )
    return RestResponse(success=True, message=message, data=result)
