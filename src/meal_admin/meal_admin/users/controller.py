from __future__ import annotations

from datetime import timedelta

from flask import Flask, current_app, flash, redirect, render_template, request, session, url_for

from ..common.logger import get_logger
from ..core.constants import DEPARTMENTS, ALL_DEPARTMENTS
from ..core.exceptions import DomainError
from ..container import Container

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    departments = [d for d in DEPARTMENTS if d != ALL_DEPARTMENTS]

    @app.route("/", endpoint="index")
    def index():
        if container.auth_service.current_admin():
            return redirect(url_for("dashboard"))
        return redirect(url_for("login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if container.auth_service.current_admin():
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                admin = container.auth_service.login(email, password)

                session.permanent = bool(remember)
                app.permanent_session_lifetime = timedelta(days=int(current_app.config["SESSION_DAYS"]))

                flash(f"Welcome back, {admin.name}!", "success")
                return redirect(url_for("dashboard"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Unexpected error during login")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error while logging in: {e}", "danger")
                else:
                    flash("System error while logging in", "danger")

        return render_template("login.html", email=request.form.get("email", ""))

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if container.auth_service.current_admin():
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            try:
                admin = container.auth_service.register_admin(
                    name=request.form.get("name", ""),
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                    confirm_password=request.form.get("confirm_password", ""),
                    phone=request.form.get("phone", ""),
                    pin=request.form.get("pin", ""),
                    department=request.form.get("department", ""),
                )
                flash(f"Admin account created for {admin.name}.", "success")
                return redirect(url_for("dashboard"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error during admin signup")
                flash("System error while creating the account", "danger")

        return render_template("signup.html", departments=departments, form=request.form)

    @app.route("/logout", endpoint="logout")
    def logout():
        container.auth_service.logout()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
