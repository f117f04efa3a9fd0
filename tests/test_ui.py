"""Tests for flask_swagger12.web.ui -- documentation browser Blueprint."""

from __future__ import annotations

import logging

import pytest
from flask import Flask

from flask_swagger12 import Swagger
from flask_swagger12.web.ui import create_ui_blueprint, get_path, index_path


@pytest.fixture()
def assets(tmp_path):
    d = tmp_path / "ui"
    d.mkdir()
    (d / "index.html").write_text("<html>docs</html>", encoding="utf-8")
    (d / "swagger.js").write_text("// js", encoding="utf-8")
    return d


def _ui_app(root: str, assets_dir=None) -> Flask:
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SWAGGER12_UI_ENABLED"] = True
    app.config["SWAGGER12_UI_PATH"] = root
    if assets_dir is not None:
        app.config["SWAGGER12_UI_ASSETS_DIR"] = str(assets_dir)
    Swagger(app)
    return app


class TestGetPath:
    @pytest.mark.parametrize(
        "root,uri,expected",
        [
            ("", "/", ""),
            ("/", "/", ""),
            ("", "/index.html", "index.html"),
            ("/ui-docs", "/index.html", None),
            ("/ui-docs", "/ui-docs/index.html", "index.html"),
            ("/ui-docs", "/ui-docs", ""),
            ("/ui-docs", "/ui-docsx/index.html", None),
        ],
    )
    def test_get_path(self, root, uri, expected):
        assert get_path(root, uri) == expected


class TestIndexPath:
    @pytest.mark.parametrize(
        "root,expected",
        [
            ("", "/index.html"),
            ("/", "/index.html"),
            ("/ui-docs", "/ui-docs/index.html"),
            ("/ui-docs/", "/ui-docs/index.html"),
        ],
    )
    def test_index_path(self, root, expected):
        assert index_path(root) == expected


class TestRedirects:
    def test_root_redirect(self, assets):
        client = _ui_app("/", assets).test_client()
        resp = client.get("/")
        assert resp.status_code == 302
        assert resp.headers["Location"] == "/index.html"

    @pytest.mark.parametrize("uri", ["/ui-docs", "/ui-docs/"])
    def test_mounted_redirect(self, assets, uri):
        client = _ui_app("/ui-docs", assets).test_client()
        resp = client.get(uri)
        assert resp.status_code == 302
        assert resp.headers["Location"] == "/ui-docs/index.html"

    def test_redirect_keeps_script_root(self, assets):
        client = _ui_app("/ui-docs", assets).test_client()
        resp = client.get("/ui-docs", environ_overrides={"SCRIPT_NAME": "/app"})
        assert resp.headers["Location"] == "/app/ui-docs/index.html"


class TestAssets:
    def test_serves_index(self, assets):
        client = _ui_app("/ui-docs", assets).test_client()
        resp = client.get("/ui-docs/index.html")
        assert resp.status_code == 200
        assert b"docs" in resp.data
        resp.close()

    def test_serves_nested_asset(self, assets):
        client = _ui_app("/ui-docs", assets).test_client()
        resp = client.get("/ui-docs/swagger.js")
        assert resp.status_code == 200
        resp.close()

    def test_missing_asset(self, assets):
        client = _ui_app("/ui-docs", assets).test_client()
        assert client.get("/ui-docs/missing.js").status_code == 404

    def test_no_assets_dir(self):
        client = _ui_app("/ui-docs").test_client()
        assert client.get("/ui-docs/index.html").status_code == 404
        assert client.get("/ui-docs").status_code == 302

    def test_outside_mount_not_served(self, assets):
        client = _ui_app("/ui-docs", assets).test_client()
        assert client.get("/index.html").status_code == 404

    def test_docs_still_served(self, assets):
        client = _ui_app("/", assets).test_client()
        assert client.get("/api/api-docs").status_code == 200


class TestMissingAssetsDir:
    def test_warning_logged(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="flask_swagger12"):
            create_ui_blueprint("/ui-docs", str(tmp_path / "missing"))
        assert "assets directory not found" in caplog.text
