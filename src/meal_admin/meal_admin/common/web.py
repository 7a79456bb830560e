from __future__ import annotations

from functools import wraps

from flask import flash, redirect, url_for


def make_admin_required(container):
    """Decorator factory: the view renders only for an ADMIN held in the session."""

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if container.auth_service.current_admin() is None:
                flash("Please log in to continue!", "warning")
                return redirect(url_for("login"))
            return view(*args, **kwargs)

        return wrapper

    return admin_required
