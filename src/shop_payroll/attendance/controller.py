from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container
from .model import AttendanceRecord, PartTimeAttendance


def attendance_to_dict(r: AttendanceRecord) -> dict:
    data = {
        "id": r.attendance_id,
        "date": r.work_date.isoformat(),
        "status": r.status.value,
        "attendanceValue": r.attendance_value,
        "isSunday": r.is_sunday,
        "isPartTime": r.is_part_time,
    }
    if isinstance(r, PartTimeAttendance):
        data.update(
            staffName=r.staff_name,
            shift=r.shift.value,
            location=r.location.value,
            salary=r.salary,
            salaryOverride=r.salary_override,
        )
    else:
        data["staffId"] = r.staff_id
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        body = json_body()
        record = container.attendance_service.mark_full_time(body.get("staffId"), body.get("date"), body.get("status"))
        return ok(attendance_to_dict(record))

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="bulk_mark_attendance")
    def bulk_mark_attendance():
        body = json_body()
        records = container.attendance_service.bulk_mark(body.get("date"), body.get("status"))
        return ok([attendance_to_dict(r) for r in records])

    @app.route("/api/attendance/part-time", methods=["POST"], endpoint="add_part_time")
    def add_part_time():
        body = json_body()
        record = container.attendance_service.add_part_time_entry(
            staff_name=body.get("staffName", ""),
            work_date=body.get("date"),
            shift=body.get("shift"),
            location=body.get("location"),
        )
        return ok(attendance_to_dict(record), status=201)

    @app.route("/api/attendance/part-time/<attendance_id>/salary", methods=["PUT"], endpoint="override_part_time")
    def override_part_time(attendance_id: str):
        body = json_body()
        record = container.attendance_service.override_part_time_salary(attendance_id, body.get("salary"))
        return ok(attendance_to_dict(record))

    @app.route("/api/attendance/part-time/<attendance_id>", methods=["DELETE"], endpoint="delete_part_time")
    def delete_part_time(attendance_id: str):
        container.attendance_service.delete_part_time_entry(attendance_id)
        return ok()
