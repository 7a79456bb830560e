from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.base import MealAdminApi
from .api.http_client import HttpMealAdminApi
from .api.images import resolve_image_url
from .employees.service import EmployeeService
from .meal_requests.review import RequestReviewBoard, ReviewActions
from .session.store import SessionStore
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    sessions: SessionStore
    api: MealAdminApi
    image_base_url: str

    auth_service: AuthService
    employee_service: EmployeeService
    review_actions: ReviewActions

    def review_board(self) -> RequestReviewBoard:
        """A fresh board per dashboard view; action state is shared app-wide."""
        return RequestReviewBoard(self.api, self.review_actions)

    def image_url(self, image_url: Optional[str]) -> Optional[str]:
        return resolve_image_url(image_url, self.image_base_url)


def build_container(
    *,
    api_base_url: str,
    image_base_url: str,
    timeout: float,
    api: Optional[MealAdminApi] = None,
    sessions: Optional[SessionStore] = None,
) -> Container:
    sessions = sessions or SessionStore()
    api = api or HttpMealAdminApi(api_base_url, sessions.read, timeout=timeout)

    return Container(
        sessions=sessions,
        api=api,
        image_base_url=image_base_url,
        auth_service=AuthService(api, sessions),
        employee_service=EmployeeService(api),
        review_actions=ReviewActions(),
    )
