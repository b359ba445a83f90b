from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container
from .model import AdvanceDeduction


def advance_to_dict(adv: AdvanceDeduction) -> dict:
    return {
        "id": adv.advance_id,
        "staffId": adv.staff_id,
        "month": adv.month,
        "year": adv.year,
        "oldAdvance": adv.old_advance,
        "currentAdvance": adv.current_advance,
        "deduction": adv.deduction,
        "newAdvance": adv.new_advance,
        "notes": adv.notes,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/advances/<int:year>/<int:month>/open", methods=["POST"], endpoint="open_advance_month")
    def open_advance_month(year: int, month: int):
        opened = container.advance_service.open_month_for_active_staff(month, year)
        return ok([advance_to_dict(a) for a in opened])

    @app.route("/api/advances/<staff_id>/<int:year>/<int:month>", methods=["PUT"], endpoint="update_advance")
    def update_advance(staff_id: str, year: int, month: int):
        body = json_body()
        record = container.advance_service.update_advance(
            staff_id,
            month,
            year,
            old_advance=body.get("oldAdvance"),
            current_advance=body.get("currentAdvance"),
            deduction=body.get("deduction"),
            notes=body.get("notes"),
        )
        return ok(advance_to_dict(record))
