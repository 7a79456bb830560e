import json

from flask import Flask, session
from conftest import make_employee

from src.meal_admin.meal_admin.core.enums import Theme
from src.meal_admin.meal_admin.session.store import SessionStore


def test_save_and_read_token_and_user():
    storage = {}
    store = SessionStore(storage)
    admin = make_employee(7, name="Root Admin", role="ADMIN")

    store.save("tok-1")
    store.save_user(admin)

    assert storage["token"] == "tok-1"
    assert json.loads(storage["user"])["uid"] == "uid-7"
    assert store.read() == "tok-1"
    assert store.read_user() == admin


def test_clear_removes_token_and_user_but_keeps_theme():
    storage = {}
    store = SessionStore(storage)
    store.save("tok-1")
    store.save_user(make_employee())
    store.save_theme(Theme.DARK)

    store.clear()

    assert "token" not in storage
    assert "user" not in storage
    assert store.read() is None
    assert store.read_user() is None
    assert store.read_theme() == Theme.DARK


def test_unreadable_user_payload_reads_as_none():
    store = SessionStore({"user": "{not json"})
    assert store.read_user() is None


def test_unavailable_storage_returns_none_and_ignores_writes():
    store = SessionStore()  # no request context

    store.save("tok")
    store.save_user(make_employee())
    store.clear()

    assert store.read() is None
    assert store.read_user() is None
    assert store.read_theme() == Theme.LIGHT


def test_default_storage_is_flask_session():
    app = Flask(__name__)
    app.secret_key = "test"
    store = SessionStore()

    with app.test_request_context("/"):
        store.save("tok-flask")
        assert session["token"] == "tok-flask"
        assert store.read() == "tok-flask"
