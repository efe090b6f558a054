from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.web import csv_response, current_user_id, payload, role_required
from ..container import Container
from ..core.enums import ExportFormat, Role


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/manager/team", methods=["GET"], endpoint="team_summary")
    @role_required(Role.MANAGER, Role.ADMIN)
    def team_summary():
        return jsonify({"team_leaves_used": reports.team_leaves_used(), "members": list(reports.team_table().rows)})

    @app.route("/manager/team.csv", methods=["GET"], endpoint="team_csv")
    @role_required(Role.MANAGER, Role.ADMIN)
    def team_csv():
        content = container.export_service.render([reports.team_table()], ExportFormat.CSV)
        return csv_response(app, content, "team_stats.csv")

    @app.route("/manager/analytics", methods=["GET"], endpoint="team_analytics")
    @role_required(Role.MANAGER)
    def team_analytics():
        return jsonify(reports.team_analytics())

    @app.route("/feedback", methods=["POST"], endpoint="submit_feedback")
    @role_required(Role.EMPLOYEE)
    def submit_feedback():
        item = container.feedback_service.submit(employee_id=current_user_id(), message=str(payload().get("message", "")))
        return jsonify({"from": item.employee_name, "message": item.message}), 201

    @app.route("/me/insights", methods=["GET"], endpoint="my_insights")
    @role_required(Role.EMPLOYEE)
    def my_insights():
        user_id = current_user_id()
        return jsonify({"stress": asdict(reports.stress(user_id)), "pattern": asdict(reports.leave_pattern(user_id))})

    @app.route("/admin/stats", methods=["GET"], endpoint="org_stats")
    @role_required(Role.ADMIN)
    def org_stats():
        return jsonify({**reports.org_stats(), "attendance": reports.attendance_summary()})

    @app.route("/admin/feedback", methods=["GET"], endpoint="feedback_list")
    @role_required(Role.ADMIN)
    def feedback_list():
        return jsonify(list(reports.feedback_table().rows))

    @app.route("/admin/awards", methods=["GET"], endpoint="award_board")
    @role_required(Role.ADMIN)
    def award_board():
        return jsonify({"top": reports.award_board()})

    @app.route("/audit", methods=["GET"], endpoint="audit_trail")
    @role_required(Role.MANAGER, Role.ADMIN)
    def audit_trail():
        return jsonify(list(reports.audit_table().rows))
