"""flask-swagger12: Swagger 1.2 documents from structural schemas for Flask."""

__version__ = "0.1.0"

from flask_swagger12.declaration import ApiInfo, build_declaration, build_listing, extract_models
from flask_swagger12.errors import (
    DuplicateModelError,
    InvalidParameterLocationError,
    SwaggerError,
    UnsupportedSchemaError,
)
from flask_swagger12.extension import Swagger
from flask_swagger12.models import ModelRegistry, collect_models, transform
from flask_swagger12.params import convert_parameters, implied_path_parameters, to_swagger_path
from flask_swagger12.routes import ApiGroup, ApiGroups, ParameterSpec, Route, generate_nickname
from flask_swagger12.schemas import TypeDispatcher
from flask_swagger12.schemas.nodes import (
    ANY,
    ANY_KEY,
    BOOLEAN,
    DATE,
    DATE_TIME,
    DOUBLE,
    KEYWORD,
    LONG,
    STRING,
    Either,
    Enumeration,
    Eq,
    Field,
    ListOf,
    Maybe,
    Model,
    Primitive,
    Recursive,
    SetOf,
    define_model,
)

__all__ = [
    "Swagger",
    "__version__",
    # documents
    "ApiInfo",
    "build_listing",
    "build_declaration",
    "extract_models",
    # errors
    "SwaggerError",
    "UnsupportedSchemaError",
    "InvalidParameterLocationError",
    "DuplicateModelError",
    # models
    "ModelRegistry",
    "collect_models",
    "transform",
    # params and routes
    "convert_parameters",
    "implied_path_parameters",
    "to_swagger_path",
    "ApiGroup",
    "ApiGroups",
    "ParameterSpec",
    "Route",
    "generate_nickname",
    # schema nodes
    "TypeDispatcher",
    "Primitive",
    "LONG",
    "DOUBLE",
    "STRING",
    "BOOLEAN",
    "KEYWORD",
    "DATE_TIME",
    "DATE",
    "ANY",
    "ANY_KEY",
    "Enumeration",
    "Maybe",
    "Either",
    "Recursive",
    "Eq",
    "ListOf",
    "SetOf",
    "Field",
    "Model",
    "define_model",
]
