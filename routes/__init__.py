"""
===============================================================================
Focusify Routes Initialization
===============================================================================
Builds the Flask Blueprint for the application page routes.

Blueprint:
- 'routes' — Home ("/") and Timer ("/timer") pages, bound to one template engine.
"""

from flask import Blueprint

from routes.home import HomeHandler
from routes.timer import TimerHandler


def create_blueprint(engine) -> Blueprint:
    """
    Create the page Blueprint with handlers sharing the given engine.

    Args:
        engine (TemplateEngine): Compiled template set owned by the app.

    Returns:
        Blueprint: Ready to register on a Flask app.
    """
    routes = Blueprint('routes', __name__)

    home = HomeHandler(engine)
    timer = TimerHandler(engine)

    routes.add_url_rule('/', endpoint='home', view_func=home.index, methods=['GET'])
    routes.add_url_rule('/timer', endpoint='timer', view_func=timer.index, methods=['GET'])

    return routes


__all__ = ["create_blueprint", "HomeHandler", "TimerHandler"]
