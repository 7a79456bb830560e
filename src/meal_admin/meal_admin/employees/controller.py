from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, send_file, url_for

from ..common.datetime_utils import parse_month_args, shift_month, today_local
from ..common.logger import get_logger
from ..common.web import make_admin_required
from ..container import Container
from ..core.constants import ALL_DEPARTMENTS, DEPARTMENTS
from ..core.exceptions import DomainError
from ..meals.calendar import year_options
from .export import directory_to_excel

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container)

    @app.route("/employees", methods=["GET"], endpoint="employees")
    @admin_required
    def employees():
        department = request.args.get("department") or ALL_DEPARTMENTS
        query = request.args.get("q", "")

        view = None
        try:
            view = container.employee_service.directory(department=department, query=query)
        except DomainError as e:
            flash(str(e) or "Failed to load employees", "danger")
        except Exception:
            logger.exception("Unexpected error while loading employees")
            flash("Failed to load employees", "danger")

        return render_template(
            "employees.html",
            view=view,
            departments=DEPARTMENTS,
            department=department,
            query=query,
            active_page="employees",
        )

    @app.route("/employees/export", methods=["GET"], endpoint="export_employees")
    @admin_required
    def export_employees():
        try:
            view = container.employee_service.directory(
                department=request.args.get("department") or ALL_DEPARTMENTS,
                query=request.args.get("q", ""),
            )
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("employees"))

        output = directory_to_excel(view.employees)
        return send_file(
            output,
            download_name=f"employees_{today_local():%Y%m%d}.xlsx",
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    @app.route("/employees/<uid>", methods=["GET"], endpoint="employee_detail")
    @admin_required
    def employee_detail(uid: str):
        today = today_local()
        year, month = parse_month_args(request.args.get("year"), request.args.get("month"), today=today)

        view = None
        try:
            view = container.employee_service.meal_calendar(uid=uid, year=year, month=month, today=today)
        except DomainError as e:
            flash(str(e) or "Failed to load employee", "danger")
        except Exception:
            logger.exception("Unexpected error while loading employee %s", uid)
            flash("Failed to load employee", "danger")

        return render_template(
            "employee_detail.html",
            uid=uid,
            view=view,
            year=year,
            month=month,
            years=year_options(today, year),
            prev_month=shift_month(year, month, -1),
            next_month=shift_month(year, month, 1),
            active_page="employees",
        )
