"""
===============================================================================
Focusify Web Application Entry Point
===============================================================================
Builds the Flask app: compiles the template bundle, installs the mode-aware
middleware, registers the page routes and serves the bundled static assets.

Note:
- For production deployment, use Gunicorn or a WSGI-compliant server.
- Template parse errors abort startup; the app never serves a broken bundle.
"""

import argparse
import logging

from dotenv import load_dotenv
from flask import Flask

from middleware import ModeAware
from routes import create_blueprint
from utils.config import Config, load_config
from utils.template_engine import TemplateEngine


def create_app(config: Config = None, engine: TemplateEngine = None) -> Flask:
    """
    Application factory and composition root.

    Args:
        config (Config, optional): Settings; loaded from the environment if omitted.
        engine (TemplateEngine, optional): Compiled templates; the bundled set if omitted.

    Returns:
        Flask: Configured application.

    Raises:
        TemplateLoadError: The template bundle does not compile.
    """
    if config is None:
        config = load_config()
    if engine is None:
        engine = TemplateEngine()

    app = Flask(
        __name__,
        static_folder=str(engine.static_dir),
        static_url_path="/static",
    )
    app.extensions["focusify.config"] = config
    app.extensions["focusify.templates"] = engine

    ModeAware(config.is_desktop_app, app)
    app.register_blueprint(create_blueprint(engine))

    app.logger.info(
        "Focusify ready: mode=%s port=%s templates=%d",
        "desktop" if config.is_desktop_app else "web",
        config.port,
        len(engine.names()),
    )
    return app


def main(argv=None):
    """
    Console entry point (`focusify`).

    Loads .env, reads PORT and runs the development server.
    """
    parser = argparse.ArgumentParser(prog="focusify", description="Focusify web shell")
    parser.add_argument("--desktop", action="store_true", help="run as the desktop app (no auth)")
    parser.add_argument("--debug", action="store_true", help="enable Flask debug mode")
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    config = load_config(is_desktop_app=args.desktop)
    app = create_app(config)

    # A malformed PORT only fails here
    app.run(host="0.0.0.0", port=int(config.port), debug=args.debug)


if __name__ == "__main__":
    main()
