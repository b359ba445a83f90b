from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container
from .model import ArchivedStaff, StaffMember

_UPDATABLE = {
    "name": "name",
    "location": "location",
    "type": "employment_type",
    "experience": "experience",
    "basicSalary": "basic_salary",
    "incentive": "incentive",
    "hra": "hra",
}


def staff_to_dict(s: StaffMember) -> dict:
    return {
        "id": s.staff_id,
        "name": s.name,
        "location": s.location.value,
        "type": s.employment_type.value,
        "experience": s.experience,
        "basicSalary": s.basic_salary,
        "incentive": s.incentive,
        "hra": s.hra,
        "totalSalary": s.total_salary,
        "joinedDate": s.joined_date.isoformat(),
        "isActive": s.is_active,
    }


def archived_to_dict(r: ArchivedStaff) -> dict:
    return {
        "id": r.record_id,
        "originalStaffId": r.original_staff_id,
        "name": r.name,
        "location": r.location.value,
        "type": r.employment_type.value,
        "totalSalary": r.total_salary,
        "joinedDate": r.joined_date.isoformat(),
        "leftDate": r.left_date.isoformat(),
        "reason": r.reason,
        "totalAdvanceOutstanding": r.advance_outstanding,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff", methods=["GET"], endpoint="list_staff")
    def list_staff():
        return ok([staff_to_dict(s) for s in container.staff_service.list_active()])

    @app.route("/api/staff", methods=["POST"], endpoint="create_staff")
    def create_staff():
        body = json_body()
        member = container.staff_service.create_staff(
            name=body.get("name", ""),
            location=body.get("location"),
            employment_type=body.get("type", "full-time"),
            basic_salary=body.get("basicSalary", 0),
            incentive=body.get("incentive", 0),
            hra=body.get("hra", 0),
            joined_date=body.get("joinedDate"),
            experience=body.get("experience", ""),
        )
        return ok(staff_to_dict(member), status=201)

    @app.route("/api/staff/<staff_id>", methods=["PATCH"], endpoint="update_staff")
    def update_staff(staff_id: str):
        body = json_body()
        changes = {_UPDATABLE[k]: v for k, v in body.items() if k in _UPDATABLE}
        return ok(staff_to_dict(container.staff_service.update_staff(staff_id, **changes)))

    @app.route("/api/staff/<staff_id>/archive", methods=["POST"], endpoint="archive_staff")
    def archive_staff(staff_id: str):
        body = json_body()
        record = container.staff_service.archive(staff_id, body.get("reason", ""))
        return ok(archived_to_dict(record))

    @app.route("/api/archive", methods=["GET"], endpoint="list_archive")
    def list_archive():
        return ok([archived_to_dict(r) for r in container.archive_repo.list_all()])

    @app.route("/api/archive/<record_id>/rejoin", methods=["POST"], endpoint="rejoin_staff")
    def rejoin_staff(record_id: str):
        return ok(staff_to_dict(container.staff_service.rejoin(record_id)), status=201)
