"""
===============================================================================
Focusify Timer Page
===============================================================================
GET /timer  ->  pages/timer wrapped in layouts/base
"""

from flask import Response

from middleware.mode_aware import current_request_context


class TimerHandler:
    """Stateless handler for the focus timer page."""

    def __init__(self, engine):
        self.engine = engine

    def index(self) -> Response:
        ctx = current_request_context()
        html = self.engine.render_to_string("pages/timer", {
            "Title": "Timer - Focusify",
            "IsDesktopApp": ctx.is_desktop_app,
        }, layout="layouts/base")
        return Response(html, mimetype="text/html")
