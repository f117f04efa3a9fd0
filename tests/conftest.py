"""Shared test fixtures for flask-swagger12."""

from __future__ import annotations

import pytest
from flask import Flask

from flask_swagger12.schemas.nodes import LONG, STRING, Enumeration, Field, Maybe, define_model


@pytest.fixture()
def app(tmp_path):
    """Minimal Flask app with SWAGGER12_OUTPUT_DIR pointed to tmp_path."""
    a = Flask(__name__)
    a.config["TESTING"] = True
    a.config["SWAGGER12_OUTPUT_DIR"] = str(tmp_path / "docs")
    return a


@pytest.fixture()
def app_ctx(app):
    """Push an application context."""
    with app.app_context() as ctx:
        yield ctx


@pytest.fixture()
def initialized_app(app):
    """Flask app with Swagger initialized."""
    from flask_swagger12 import Swagger

    Swagger(app)
    return app


@pytest.fixture()
def country():
    return define_model(
        "Country",
        {
            "code": Enumeration(("fi", "sv")),
            "name": STRING,
        },
    )


@pytest.fixture()
def customer(country):
    return define_model(
        "Customer",
        {
            "id": LONG,
            "name": STRING,
            "address": Field(
                Maybe({"street": STRING, "country": country}),
                required=False,
            ),
        },
    )
