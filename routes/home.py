"""
===============================================================================
Focusify Home Page
===============================================================================
GET /  ->  pages/index wrapped in layouts/base
"""

from flask import Response

from middleware.mode_aware import current_request_context


class HomeHandler:
    """Stateless handler for the landing page."""

    def __init__(self, engine):
        self.engine = engine

    def index(self) -> Response:
        """
        GET /
        Method: GET

        Renders the landing page. Render failures propagate to Flask,
        which answers with a generic 500.
        """
        ctx = current_request_context()
        html = self.engine.render_to_string("pages/index", {
            "Title": "Home",
            "IsDesktopApp": ctx.is_desktop_app,
        }, layout="layouts/base")
        return Response(html, mimetype="text/html")
