"""Tests for flask_swagger12.extension -- the Swagger Flask extension."""

from __future__ import annotations

import pytest
from flask import Flask

from flask_swagger12 import Swagger
from flask_swagger12.config import SwaggerSettings
from flask_swagger12.registry import get_api_groups, get_api_info, get_dispatcher, get_settings
from flask_swagger12.routes import ApiGroups, ParameterSpec, Route
from flask_swagger12.schemas import TypeDispatcher
from flask_swagger12.schemas.nodes import LONG, STRING, define_model


class _Money:
    pass


class TestInitApp:
    def test_direct_init(self, app):
        Swagger(app)
        assert "swagger12" in app.extensions
        data = app.extensions["swagger12"]
        assert isinstance(data["settings"], SwaggerSettings)
        assert isinstance(data["groups"], ApiGroups)
        assert isinstance(data["dispatcher"], TypeDispatcher)

    def test_factory_pattern(self, app):
        swagger = Swagger()
        assert "swagger12" not in app.extensions
        swagger.init_app(app)
        assert "swagger12" in app.extensions

    def test_docs_blueprint_registered(self, initialized_app):
        assert "swagger12_docs" in initialized_app.blueprints

    def test_ui_blueprint_off_by_default(self, initialized_app):
        assert "swagger12_ui" not in initialized_app.blueprints

    def test_ui_blueprint_enabled(self, app):
        app.config["SWAGGER12_UI_ENABLED"] = True
        Swagger(app)
        assert "swagger12_ui" in app.blueprints

    def test_cli_group_registered(self, initialized_app):
        assert "swagger" in initialized_app.cli.commands

    def test_invalid_config_raises(self, app):
        app.config["SWAGGER12_UI_ENABLED"] = "yes"
        with pytest.raises(ValueError):
            Swagger(app)

    def test_apps_isolated(self):
        swagger = Swagger()
        first, second = Flask("first"), Flask("second")
        swagger.init_app(first)
        swagger.init_app(second)
        swagger.api_group(first, "pets")
        assert "pets" in get_api_groups(first)
        assert "pets" not in get_api_groups(second)

    def test_dispatcher_copied_per_app(self, app):
        base = TypeDispatcher()
        swagger = Swagger(app, dispatcher=base)
        swagger.get_dispatcher(app).register_class(_Money, lambda node, ctx: {"type": "string"})
        assert get_dispatcher(app) is not base
        assert get_dispatcher(app).classify(_Money()) == {"type": "string"}
        assert base._classes.get(_Money) is None


class TestRegistryAccessors:
    def test_not_initialized(self, app_ctx):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_api_groups()

    def test_outside_app_context(self):
        with pytest.raises(RuntimeError):
            get_api_groups()

    def test_current_app(self, initialized_app):
        with initialized_app.app_context():
            assert get_settings().docs_url_prefix == "/api/api-docs"
            assert get_api_info().api_version == "0.0.1"


class TestRouteRegistration:
    def setup_method(self):
        self.app = Flask(__name__)
        self.swagger = Swagger(self.app)
        self.user = define_model("User", {"id": LONG, "name": STRING})

    def test_api_group(self):
        group = self.swagger.api_group(self.app, "users", "User management")
        assert group.description == "User management"
        assert get_api_groups(self.app)["users"] is group

    def test_add_route_infers_path_params(self):
        stored = self.swagger.add_route(self.app, "users", Route("get", "/users/:id", return_node=self.user))
        assert stored.parameters[0].location == "path"

    def test_infer_disabled_by_config(self):
        app = Flask(__name__)
        app.config["SWAGGER12_INFER_PATH_PARAMS"] = False
        swagger = Swagger(app)
        stored = swagger.add_route(app, "users", Route("get", "/users/:id"))
        assert stored.parameters == ()

    def test_document_decorator(self):
        @self.swagger.document(
            self.app,
            "users",
            "post",
            "/users",
            parameters=[ParameterSpec("body", self.user)],
            returns=self.user,
        )
        def create_user():
            """Create a user.

            The user id is assigned by the server.
            """
            return {}

        assert create_user() == {}
        route = get_api_groups(self.app)["users"].routes[0]
        assert route.method == "post"
        assert route.summary == "Create a user."
        assert route.notes.startswith("Create a user.")
        assert "assigned by the server" in route.notes
        assert route.return_node == self.user

    def test_document_explicit_texts(self):
        @self.swagger.document(self.app, "users", "get", "/users", summary="List", notes="All users", nickname="ls")
        def list_users():
            """Ignored."""
            return []

        route = get_api_groups(self.app)["users"].routes[0]
        assert (route.summary, route.notes, route.nickname) == ("List", "All users", "ls")

    def test_document_without_docstring(self):
        @self.swagger.document(self.app, "users", "delete", "/users")
        def drop_users():
            return None

        route = get_api_groups(self.app)["users"].routes[0]
        assert route.summary is None
        assert route.notes is None
