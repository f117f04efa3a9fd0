"""Flask Extension for Swagger 1.2 documentation.

Provides the Swagger class following Flask's Extension pattern.

init_app flow:
1. load_settings(app)
2. Create ApiGroups and the app's TypeDispatcher
3. Store everything in app.extensions["swagger12"]
4. Register the docs Blueprint (listing + declarations)
5. Register the UI Blueprint if SWAGGER12_UI_ENABLED
6. Register CLI commands
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from flask import Flask

from flask_swagger12.config import load_settings
from flask_swagger12.registry import EXTENSION_KEY, get_api_groups, get_dispatcher
from flask_swagger12.routes import ApiGroup, ApiGroups, ParameterSpec, Route
from flask_swagger12.schemas import TypeDispatcher

logger = logging.getLogger("flask_swagger12")


class Swagger:
    """Flask Extension serving Swagger 1.2 documents.

    Usage (direct):
        app = Flask(__name__)
        swagger = Swagger(app)
        swagger.add_route(app, "users", Route("get", "/users/:id", return_node=User))

    Usage (factory pattern):
        swagger = Swagger()

        def create_app():
            app = Flask(__name__)
            swagger.init_app(app)
            return app
    """

    def __init__(self, app: Flask | None = None, *, dispatcher: TypeDispatcher | None = None) -> None:
        """Initialize the extension.

        Args:
            app: Flask application instance. If provided, init_app()
                 is called immediately.
            dispatcher: Type dispatcher to copy for each app. Each app gets
                 its own copy so registrations never leak between apps.
        """
        self._dispatcher = dispatcher
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Args:
            app: Flask application instance.

        Raises:
            ValueError: If any SWAGGER12_* config value is invalid.
        """
        # 1. Load and validate config
        settings = load_settings(app)

        # 2. API groups and dispatcher
        groups = ApiGroups(infer_path_params=settings.infer_path_params)
        dispatcher = self._dispatcher.copy() if self._dispatcher is not None else TypeDispatcher()

        # 3. Store in app.extensions
        app.extensions[EXTENSION_KEY] = {
            "settings": settings,
            "api_info": settings.api_info(),
            "groups": groups,
            "dispatcher": dispatcher,
        }

        # 4. Docs Blueprint
        from flask_swagger12.web import create_docs_blueprint

        app.register_blueprint(create_docs_blueprint(settings.docs_url_prefix))

        # 5. UI Blueprint
        if settings.ui_enabled:
            from flask_swagger12.web.ui import create_ui_blueprint

            app.register_blueprint(create_ui_blueprint(settings.ui_path, settings.ui_assets_dir))
            logger.debug("Documentation browser mounted at %s", settings.ui_path)

        # 6. CLI commands
        from flask_swagger12.cli import swagger_cli

        app.cli.add_command(swagger_cli)

        logger.debug("flask-swagger12 initialized for app %s (docs at %s)", app.name, settings.docs_url_prefix)

    def api_group(self, app: Flask | None, name: str, description: str | None = None) -> ApiGroup:
        """Return (creating if needed) the API group ``name``."""
        return get_api_groups(app).group(name, description)

    def add_route(self, app: Flask | None, api_name: str, route: Route) -> Route:
        """Register a route under an API group."""
        return get_api_groups(app).add_route(api_name, route)

    def document(
        self,
        app: Flask | None,
        api_name: str,
        method: str,
        uri: str,
        *,
        parameters: tuple[ParameterSpec, ...] | list[ParameterSpec] = (),
        returns: Any = None,
        summary: str | None = None,
        notes: str | None = None,
        nickname: str | None = None,
    ) -> Callable[[Callable], Callable]:
        """Decorator registering a view function's route metadata.

        The view's docstring is used as summary (first line) and notes
        (full text) when those are not given.
        """

        def decorator(func: Callable) -> Callable:
            doc = (func.__doc__ or "").strip()
            self.add_route(
                app,
                api_name,
                Route(
                    method,
                    uri,
                    parameters=tuple(parameters),
                    return_node=returns,
                    summary=summary if summary is not None else (doc.split("\n")[0].strip() or None),
                    notes=notes if notes is not None else (doc or None),
                    nickname=nickname,
                ),
            )
            return func

        return decorator

    def get_dispatcher(self, app: Flask | None = None) -> TypeDispatcher:
        """Return the type dispatcher of the given app."""
        return get_dispatcher(app)
