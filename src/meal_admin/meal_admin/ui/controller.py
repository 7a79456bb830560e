from __future__ import annotations

from flask import Flask, redirect, request, url_for

from ..container import Container
from ..core.constants import MONTH_NAMES, WEEKDAY_HEADERS


def _safe_next(target: str) -> str:
    # Only same-site relative paths
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("index")


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_globals():
        return {
            "current_user": container.auth_service.current_admin(),
            "theme": container.sessions.read_theme().value,
            "image_url": container.image_url,
            "month_names": MONTH_NAMES,
            "weekday_headers": WEEKDAY_HEADERS,
        }

    @app.route("/theme", methods=["POST"], endpoint="toggle_theme")
    def toggle_theme():
        container.sessions.save_theme(container.sessions.read_theme().toggled())
        return redirect(_safe_next(request.form.get("next", "")))
