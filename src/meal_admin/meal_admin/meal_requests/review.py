from __future__ import annotations

import contextvars
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Iterable, Optional

from ..api.base import MealAdminApi
from ..common.logger import get_logger
from ..core.constants import MONTH_NAMES
from ..core.enums import ActionState, MealMode
from ..core.exceptions import DomainError, ValidationError
from ..employees.directory import department_counts, top_department
from ..employees.model import Employee
from .model import ActionStatus, MealRequest

logger = get_logger(__name__)

_MODE_LABELS = {
    MealMode.ON.value: "Turn ON",
    MealMode.OFF.value: "Turn OFF",
    MealMode.AUTO_ON.value: "Auto ON",
    MealMode.AUTO_OFF.value: "Auto OFF",
}


def mode_label(mode: str) -> str:
    return _MODE_LABELS.get(mode, mode)


def mode_tone(mode: str) -> str:
    """CSS tone for a mode badge: on / off / neutral."""
    if mode in (MealMode.ON.value, MealMode.AUTO_ON.value):
        return "on"
    if mode in (MealMode.OFF.value, MealMode.AUTO_OFF.value):
        return "off"
    return "neutral"


def format_dates(request: MealRequest) -> str:
    """'Sun 1, Mon 2, Tue 3' in ascending day order; invalid days show as numbers."""
    parts = []
    for day in request.sorted_days:
        try:
            parts.append(f"{date(request.year, request.month, day):%a} {day}")
        except ValueError:
            parts.append(str(day))
    return ", ".join(parts)


def month_label(request: MealRequest) -> str:
    if 1 <= request.month <= 12:
        return f"{MONTH_NAMES[request.month - 1]} {request.year}"
    return f"{request.month}/{request.year}"


class ReviewActions:
    """Per-request ActionStatus map shared by every dashboard view.

    Lives as long as the app, so an approve or reject started by one HTTP
    request is visible to the next one. Ids with no entry are pending.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._statuses: dict[str, ActionStatus] = {}

    def status_of(self, request_id: str) -> ActionStatus:
        with self._lock:
            return self._statuses.get(str(request_id), ActionStatus.pending())

    def snapshot(self) -> dict[str, ActionStatus]:
        with self._lock:
            return dict(self._statuses)

    def begin(self, request_id: str, status: ActionStatus) -> None:
        request_id = str(request_id)
        with self._lock:
            current = self._statuses.get(request_id)
            if current is not None and current.in_flight:
                raise ValidationError("Another action is already in progress for this request")
            self._statuses[request_id] = status

    def finish(self, request_id: str, error: Optional[str]) -> None:
        request_id = str(request_id)
        with self._lock:
            if error is None:
                self._statuses.pop(request_id, None)
            else:
                self._statuses[request_id] = ActionStatus.failed(error)

    def retain(self, request_ids: Iterable[str]) -> None:
        """Forget settled ids that are no longer pending on the backend."""
        keep = {str(i) for i in request_ids}
        with self._lock:
            self._statuses = {
                rid: status for rid, status in self._statuses.items() if rid in keep or status.in_flight
            }


class RequestReviewBoard:
    """Pending-request review workflow for one dashboard view.

    Action state lives in a ReviewActions map; pass the app-wide one so that
    views share it. A successful approve or reject removes exactly that
    request from the held list; a failure leaves the list untouched and
    records failed(reason). Once the board is closed, late results no longer
    touch its lists, but the shared action state is still settled.
    """

    def __init__(self, api: MealAdminApi, actions: Optional[ReviewActions] = None):
        self._api = api
        self._lock = threading.Lock()
        self._closed = False
        self._actions = actions if actions is not None else ReviewActions()
        self.requests: list[MealRequest] = []
        self.employees: list[Employee] = []
        self.error = ""

    def __enter__(self) -> "RequestReviewBoard":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def actions(self) -> dict[str, ActionStatus]:
        return self._actions.snapshot()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        with self._lock:
            self._closed = True

    def load(self) -> bool:
        """Fetch pending requests and employees concurrently; replace the held lists on success."""
        self.error = ""
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="review-load") as pool:
            # Workers run in a copy of the caller's context so they see the Flask request/session
            requests_future = pool.submit(contextvars.copy_context().run, self._api.get_pending_requests)
            employees_future = pool.submit(contextvars.copy_context().run, self._api.get_employees)
            try:
                requests_data = list(requests_future.result())
                employees_data = list(employees_future.result())
            except DomainError as e:
                # The executor still joins the other call; its result is discarded
                return self._fail_load(str(e))
            except Exception:
                logger.exception("Unexpected error while loading pending requests")
                return self._fail_load("Failed to load data")

        with self._lock:
            if self._closed:
                logger.debug("Review board closed before load finished; dropping results")
                return False
            self.requests = requests_data
            self.employees = employees_data
        self._actions.retain(r.id for r in requests_data)
        logger.info("Loaded %d pending requests and %d employees", len(requests_data), len(employees_data))
        return True

    def refresh(self) -> bool:
        return self.load()

    def _fail_load(self, message: str) -> bool:
        logger.warning("Loading review data failed: %s", message)
        if not self._closed:
            self.error = message or "Failed to load data"
        return False

    def status_of(self, request_id: str) -> ActionStatus:
        return self._actions.status_of(request_id)

    def _begin(self, request_id: str, status: ActionStatus) -> None:
        if self._closed:
            raise ValidationError("This view is no longer active")
        self._actions.begin(request_id, status)

    def _finish(self, request_id: str, error: Optional[str]) -> bool:
        self._actions.finish(request_id, error)
        with self._lock:
            if self._closed:
                return error is None
            if error is None:
                self.requests = [r for r in self.requests if r.id != request_id]
                return True
            self.error = error
            return False

    def _run(self, request_id: str, status: ActionStatus, call, default_error: str) -> bool:
        request_id = str(request_id)
        self._begin(request_id, status)
        try:
            call()
        except DomainError as e:
            logger.warning("%s failed for request %s: %s", status.state.value, request_id, e)
            return self._finish(request_id, str(e) or default_error)
        except Exception:
            logger.exception("Unexpected error while %s request %s", status.state.value, request_id)
            return self._finish(request_id, default_error)
        logger.info("Request %s %s", request_id, "approved" if status.state == ActionState.APPROVING else "rejected")
        return self._finish(request_id, None)

    def approve(self, request_id: str) -> bool:
        return self._run(
            request_id,
            ActionStatus.approving(),
            lambda: self._api.approve_request(str(request_id)),
            "Failed to approve request",
        )

    def reject(self, request_id: str, reason: str = "") -> bool:
        reason = reason if reason and reason.strip() else ""
        return self._run(
            request_id,
            ActionStatus.rejecting(),
            lambda: self._api.reject_request(str(request_id), reason),
            "Failed to reject request",
        )

    def stats(self) -> dict:
        counts = department_counts(self.employees)
        return {
            "pending": len(self.requests),
            "employees": len(self.employees),
            "top_department": top_department(counts),
        }
