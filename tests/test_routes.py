"""Tests for the Home and Timer pages through the Flask app."""

import pytest
from flask import Flask

from app import create_app
from routes import create_blueprint
from utils.config import Config
from utils.errors import TemplateLoadError
from utils.template_engine import TemplateEngine


class TestHome:

    def test_desktop_mode(self, desktop_client):
        response = desktop_client.get("/")
        assert response.status_code == 200
        assert response.mimetype == "text/html"
        html = response.get_data(as_text=True)
        assert "<title>Home</title>" in html
        assert 'data-desktop-app="true"' in html

    def test_web_mode(self, web_client):
        html = web_client.get("/").get_data(as_text=True)
        assert "<title>Home</title>" in html
        assert 'data-desktop-app="false"' in html

    def test_post_not_allowed(self, web_client):
        assert web_client.post("/").status_code == 405


class TestTimer:

    @pytest.mark.parametrize("is_desktop_app,marker", [(True, "true"), (False, "false")])
    def test_title_in_both_modes(self, engine, is_desktop_app, marker):
        app = create_app(Config(port="3000", is_desktop_app=is_desktop_app), engine)
        response = app.test_client().get("/timer")
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "<title>Timer - Focusify</title>" in html
        assert f'data-desktop-app="{marker}"' in html
        assert 'id="timer-display"' in html

    def test_modes_differ_only_in_marker(self, desktop_client, web_client):
        desktop = desktop_client.get("/timer").get_data(as_text=True)
        web = web_client.get("/timer").get_data(as_text=True)
        desktop = desktop.replace('data-desktop-app="true"', "").replace(
            '<span class="nav-mode">Desktop</span>', ""
        )
        web = web.replace('data-desktop-app="false"', "")
        assert desktop == web


def test_static_assets_served(web_client):
    response = web_client.get("/static/timer.js")
    assert response.status_code == 200


def test_without_middleware_marker_is_empty(engine):
    app = Flask(__name__)
    app.register_blueprint(create_blueprint(engine))
    response = app.test_client().get("/")
    assert response.status_code == 200
    assert 'data-desktop-app=""' in response.get_data(as_text=True)


def test_render_failure_becomes_server_error(make_bundle):
    bundle = make_bundle({
        "layouts/base.html": "{{ Title.missing.field }}",
        "pages/index.html": "",
        "pages/timer.html": "",
    })
    engine = TemplateEngine(bundle, include_partials=False)
    app = create_app(Config(port="3000", is_desktop_app=False), engine)
    response = app.test_client().get("/")
    assert response.status_code == 500


def test_broken_bundle_aborts_startup(make_bundle):
    bundle = make_bundle({"layouts/base.html": "{% block %}"})
    with pytest.raises(TemplateLoadError):
        create_app(Config(port="3000", is_desktop_app=False), TemplateEngine(bundle))


def test_app_keeps_shared_state(engine):
    config = Config(port="4000", is_desktop_app=True)
    app = create_app(config, engine)
    assert app.extensions["focusify.config"] is config
    assert app.extensions["focusify.templates"] is engine
