from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import csv_response, current_user_id, date_field, payload, role_required
from ..container import Container
from ..core.enums import ExportFormat, Role
from ..reports.service import request_row

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger

    @app.route("/leaves", methods=["GET"], endpoint="my_leaves")
    @role_required(Role.EMPLOYEE)
    def my_leaves():
        return jsonify([request_row(r) for r in ledger.requests_for(current_user_id())])

    @app.route("/leaves", methods=["POST"], endpoint="apply_leave")
    @role_required(Role.EMPLOYEE)
    def apply_leave():
        data = payload()
        req = ledger.apply(
            current_user_id(),
            date_field(data, "start_date"),
            date_field(data, "end_date"),
            str(data.get("leave_type", "")),
            str(data.get("reason", "")),
        )
        return jsonify(request_row(req)), 201

    @app.route("/leaves/<int:request_id>", methods=["DELETE"], endpoint="cancel_leave")
    @role_required(Role.EMPLOYEE)
    def cancel_leave(request_id: int):
        req = ledger.cancel(current_user_id(), request_id)
        return jsonify({"cancelled": req.request_id, "restored_days": req.requested_days})

    @app.route("/leaves/<int:request_id>", methods=["PUT"], endpoint="edit_leave")
    @role_required(Role.EMPLOYEE)
    def edit_leave(request_id: int):
        data = payload()
        req = ledger.edit(
            current_user_id(),
            request_id,
            date_field(data, "start_date"),
            date_field(data, "end_date"),
            str(data.get("leave_type", "")),
            str(data.get("reason", "")),
        )
        return jsonify({"replaced": request_id, "request": request_row(req)})

    @app.route("/manager/leaves", methods=["GET"], endpoint="all_leaves")
    @role_required(Role.MANAGER, Role.ADMIN)
    def all_leaves():
        return jsonify([request_row(r) for r in ledger.all()])

    @app.route("/manager/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @role_required(Role.MANAGER)
    def approve_leave(request_id: int):
        return jsonify(request_row(ledger.approve(request_id)))

    @app.route("/manager/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @role_required(Role.MANAGER)
    def reject_leave(request_id: int):
        outcome = ledger.reject(request_id)
        if outcome.warning:
            logger.warning(outcome.warning)
        return jsonify(
            {
                "request": request_row(outcome.request),
                "balance_restored": outcome.balance_restored,
                "warning": outcome.warning,
            }
        )

    @app.route("/manager/leaves.csv", methods=["GET"], endpoint="leaves_csv")
    @role_required(Role.MANAGER, Role.ADMIN)
    def leaves_csv():
        content = container.export_service.render([container.report_service.requests_table()], ExportFormat.CSV)
        return csv_response(app, content, "leave_requests.csv")
