"""FastAPI dependencies shared by the catering routers."""

from __future__ import annotations

from fastapi import Header, Request

from config import get_settings

from ..domain.models import UserRole
from ..domain.quote_status import QuoteStatus
from ..repos.catering_repo import CateringRepo
from ..services.quote_service import QuoteLifecycle


def get_repo(request: Request) -> CateringRepo:
    """Return the repository attached to the running application."""

    return request.app.state.repo


def get_lifecycle(request: Request) -> QuoteLifecycle:
    settings = get_settings()
    return QuoteLifecycle(
        request.app.state.repo,
        initial_status=QuoteStatus(settings.initial_quote_status),
        default_approver=settings.default_approver,
    )


def get_role(
    x_user_role: UserRole = Header(UserRole.ADMIN, alias="X-User-Role"),
) -> UserRole:
    """Return the role driving the UI.

    The role only filters which figures are rendered; it grants nothing.
    """

    return x_user_role
