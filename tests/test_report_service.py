# tests/test_report_service.py
"""Unit tests for zone and vehicle report aggregation."""

import pytest
from unittest.mock import MagicMock, patch
from datetime import date, datetime, timedelta
from app.exceptions import InvalidDateRange, InvalidInput
from app.models.waste_log import WasteLog
from app.services.report_service import zone_report, vehicle_report, ZoneReportRow, VehicleReportRow

SVC = "app.services.report_service"


def make_log(vehicle="RT001", zone="Z001", started=datetime(2024, 5, 1, 8, 0), weight=10.0, completed=True):
    return WasteLog(
        zone_id=zone, vehicle_id=vehicle, worker_id="W001",
        collection_start_time=started,
        collection_end_time=started + timedelta(hours=1) if completed else None,
        weight_collected=weight if completed else None,
    )


class TestZoneReport:
    def test_single_completed_log(self):
        logs = [make_log(weight=45.5)]
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=logs):
            rows = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1))

        assert rows == [ZoneReportRow(zone_id="Z001", date=date(2024, 5, 1), vehicle_count=1, total_weight=45.5)]

    def test_two_vehicles_same_day(self):
        logs = [make_log("RT001", weight=30.0), make_log("RT002", weight=20.0)]
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=logs):
            rows = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1))

        assert len(rows) == 1
        assert rows[0].vehicle_count == 2
        assert rows[0].total_weight == pytest.approx(50.0)

    def test_vehicle_counted_once_per_day(self):
        logs = [
            make_log("RT001", started=datetime(2024, 5, 1, 7, 0), weight=12.0),
            make_log("RT001", started=datetime(2024, 5, 1, 13, 0), weight=8.5),
        ]
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=logs):
            rows = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1))

        assert rows[0].vehicle_count == 1
        assert rows[0].total_weight == pytest.approx(20.5)

    def test_days_ordered_ascending(self):
        logs = [
            make_log("RT001", started=datetime(2024, 5, 3, 9, 0), weight=3.0),
            make_log("RT002", started=datetime(2024, 5, 1, 9, 0), weight=1.0),
            make_log("PT001", started=datetime(2024, 5, 2, 23, 59), weight=2.0),
        ]
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=logs):
            rows = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 3))

        assert [r.date for r in rows] == [date(2024, 5, 1), date(2024, 5, 2), date(2024, 5, 3)]
        assert [r.total_weight for r in rows] == [1.0, 2.0, 3.0]

    def test_active_logs_ignored(self):
        logs = [make_log("RT001", weight=5.0), make_log("RT002", completed=False)]
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=logs):
            rows = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1))

        assert rows[0].vehicle_count == 1
        assert rows[0].total_weight == 5.0

    def test_no_completed_logs_is_empty(self):
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=[make_log(completed=False)]):
            assert zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1)) == []

    def test_query_covers_whole_days(self):
        db = MagicMock()
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=[]) as mock_find:
            zone_report(db, "Z001", date(2024, 5, 1), date(2024, 5, 2))

        mock_find.assert_called_once_with(
            db, "Z001", datetime(2024, 5, 1, 0, 0), datetime(2024, 5, 2, 23, 59, 59, 999999)
        )

    def test_start_after_end_rejected_without_query(self):
        with patch(f"{SVC}.find_logs_by_zone_between") as mock_find:
            with pytest.raises(InvalidDateRange):
                zone_report(MagicMock(), "Z001", date(2024, 5, 2), date(2024, 5, 1))
        mock_find.assert_not_called()

    def test_malformed_zone_rejected(self):
        with patch(f"{SVC}.find_logs_by_zone_between") as mock_find:
            with pytest.raises(InvalidInput):
                zone_report(MagicMock(), "Z\u0661\u0662\u0663", date(2024, 5, 1), date(2024, 5, 1))
        mock_find.assert_not_called()

    def test_repeated_calls_identical(self):
        logs = [make_log("RT001", weight=1.5), make_log("RT002", weight=2.5)]
        with patch(f"{SVC}.find_logs_by_zone_between", return_value=logs):
            first = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1))
            second = zone_report(MagicMock(), "Z001", date(2024, 5, 1), date(2024, 5, 1))
        assert first == second


class TestVehicleReport:
    def test_single_trip(self):
        logs = [make_log("RT001", zone="Z004", weight=12.3)]
        with patch(f"{SVC}.find_logs_by_vehicle_between", return_value=logs):
            rows = vehicle_report(MagicMock(), "RT001", date(2024, 5, 1), date(2024, 5, 1))

        assert rows == [VehicleReportRow(vehicle_id="RT001", zone_id="Z004", weight=12.3,
                                         collection_date=date(2024, 5, 1))]

    def test_one_row_per_trip_ordered_by_date(self):
        logs = [
            make_log("RT001", zone="Z002", started=datetime(2024, 5, 2, 8, 0), weight=4.0),
            make_log("RT001", zone="Z001", started=datetime(2024, 5, 1, 8, 0), weight=1.0),
            make_log("RT001", zone="Z003", started=datetime(2024, 5, 1, 15, 0), weight=2.0),
            make_log("RT001", started=datetime(2024, 5, 1, 18, 0), completed=False),
        ]
        with patch(f"{SVC}.find_logs_by_vehicle_between", return_value=logs):
            rows = vehicle_report(MagicMock(), "RT001", date(2024, 5, 1), date(2024, 5, 2))

        assert [(r.zone_id, r.collection_date) for r in rows] == [
            ("Z001", date(2024, 5, 1)),
            ("Z003", date(2024, 5, 1)),
            ("Z002", date(2024, 5, 2)),
        ]

    def test_empty_range(self):
        with patch(f"{SVC}.find_logs_by_vehicle_between", return_value=[]):
            assert vehicle_report(MagicMock(), "PT001", date(2024, 5, 1), date(2024, 5, 31)) == []

    def test_start_after_end_rejected_without_query(self):
        with patch(f"{SVC}.find_logs_by_vehicle_between") as mock_find:
            with pytest.raises(InvalidDateRange):
                vehicle_report(MagicMock(), "RT001", date(2024, 6, 1), date(2024, 5, 1))
        mock_find.assert_not_called()

    def test_malformed_vehicle_rejected(self):
        with pytest.raises(InvalidInput):
            vehicle_report(MagicMock(), "TR001", date(2024, 5, 1), date(2024, 5, 1))
