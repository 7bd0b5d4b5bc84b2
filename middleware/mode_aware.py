"""
===============================================================================
Focusify Mode-Aware Middleware
===============================================================================
Attaches a typed request context to every request before it reaches a route.

Desktop mode:
- No authentication, every request acts as the built-in local user.

Web mode:
- Identity comes from authenticate_web_request(), which currently resolves
  to no user at all.
"""

from dataclasses import dataclass
from typing import Optional

from flask import current_app, g, request

# Synthetic identity used by the desktop shell
DESKTOP_USER_ID = 1

# Attribute on flask.g holding the RequestContext
_CONTEXT_ATTR = "request_context"


@dataclass(frozen=True)
class RequestContext:
    """
    Per-request values read by route handlers.

    Attributes:
        is_desktop_app (bool | None): Mode flag; None when no middleware ran.
        user_id (int | None): Authenticated user, if any.
    """
    is_desktop_app: Optional[bool] = None
    user_id: Optional[int] = None


def authenticate_web_request(req) -> Optional[int]:
    """
    Resolve the user behind a web-mode request.

    Session based authentication is not implemented, so no request is ever
    authenticated.

    Args:
        req: The incoming Flask request.

    Returns:
        int | None: Always None.
    """
    return None


def current_request_context() -> RequestContext:
    """Context attached by ModeAware, or an empty one if it never ran."""
    return g.get(_CONTEXT_ATTR) or RequestContext()


class ModeAware:
    """
    before_request hook that records the application mode on each request.

    Never rejects or short-circuits a request.

    Args:
        is_desktop_app (bool): Mode captured once at construction.
        app (Flask, optional): Registers immediately when given.
    """

    def __init__(self, is_desktop_app: bool, app=None):
        self.is_desktop_app = is_desktop_app
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        app.before_request(self.attach)

    def attach(self) -> None:
        if self.is_desktop_app:
            user_id = DESKTOP_USER_ID
        else:
            user_id = authenticate_web_request(request)

        setattr(g, _CONTEXT_ATTR, RequestContext(is_desktop_app=self.is_desktop_app, user_id=user_id))
        current_app.logger.debug(
            "%s %s desktop=%s user_id=%s", request.method, request.path, self.is_desktop_app, user_id
        )
        # Returning None lets Flask continue to the view
