from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.logger import get_logger
from ..common.web import make_admin_required
from ..container import Container
from ..core.exceptions import DomainError
from .review import format_dates, mode_label, mode_tone, month_label

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container)

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @admin_required
    def dashboard():
        with container.review_board() as board:
            board.load()
            if board.error:
                flash(board.error, "danger")
            return render_template(
                "dashboard.html",
                board=board,
                stats=board.stats(),
                format_dates=format_dates,
                mode_label=mode_label,
                mode_tone=mode_tone,
                month_label=month_label,
                active_page="dashboard",
            )

    @app.route("/dashboard/refresh", methods=["POST"], endpoint="refresh_dashboard")
    @admin_required
    def refresh_dashboard():
        # Every dashboard render re-fetches; refresh is a plain reload
        return redirect(url_for("dashboard"))

    def _act(request_id: str, action: str):
        with container.review_board() as board:
            try:
                if action == "approve":
                    ok = board.approve(request_id)
                    success_message = "Request approved"
                else:
                    ok = board.reject(request_id, request.form.get("reason", ""))
                    success_message = "Request rejected"
            except DomainError as e:
                flash(str(e), "danger")
                return redirect(url_for("dashboard"))
            except Exception:
                logger.exception("Unexpected error during %s of request %s", action, request_id)
                flash("System error while processing the request", "danger")
                return redirect(url_for("dashboard"))

            if ok:
                flash(success_message, "success" if action == "approve" else "info")
            else:
                flash(board.error, "danger")
        return redirect(url_for("dashboard"))

    @app.route("/dashboard/requests/<request_id>/approve", methods=["POST"], endpoint="approve_request")
    @admin_required
    def approve_request(request_id: str):
        return _act(request_id, "approve")

    @app.route("/dashboard/requests/<request_id>/reject", methods=["POST"], endpoint="reject_request")
    @admin_required
    def reject_request(request_id: str):
        return _act(request_id, "reject")
