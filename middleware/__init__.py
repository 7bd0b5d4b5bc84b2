"""
===============================================================================
Focusify Middleware Initialization
===============================================================================
Exposes the request hooks that run before every route handler.
"""

from .mode_aware import (
    DESKTOP_USER_ID,
    ModeAware,
    RequestContext,
    authenticate_web_request,
    current_request_context,
)

__all__ = [
    "DESKTOP_USER_ID", "ModeAware", "RequestContext",
    "authenticate_web_request", "current_request_context",
]
