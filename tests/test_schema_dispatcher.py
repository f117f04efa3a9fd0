"""Tests for schemas/__init__.py -- TypeDispatcher."""

from __future__ import annotations

import datetime
import enum

import pytest
from pydantic import BaseModel

from flask_swagger12.errors import UnsupportedSchemaError
from flask_swagger12.models import ModelRegistry
from flask_swagger12.schemas import TypeDispatcher, get_default_dispatcher
from flask_swagger12.schemas.nodes import (
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
    ListOf,
    Maybe,
    Model,
    Recursive,
    SetOf,
)


class _Point(BaseModel):
    x: int
    y: int


class _Size(enum.Enum):
    SMALL = "s"
    LARGE = "l"


class _Money:
    """A type the dispatcher knows nothing about."""


# ---------------------------------------------------------------------------
# Built-in mappings
# ---------------------------------------------------------------------------


class TestBuiltins:
    def setup_method(self):
        self.dispatcher = TypeDispatcher()

    @pytest.mark.parametrize(
        "node,expected",
        [
            (LONG, {"type": "integer", "format": "int64"}),
            (DOUBLE, {"type": "number", "format": "double"}),
            (STRING, {"type": "string"}),
            (BOOLEAN, {"type": "boolean"}),
            (KEYWORD, {"type": "string"}),
            (DATE_TIME, {"type": "string", "format": "date-time"}),
            (DATE, {"type": "string", "format": "date"}),
            (int, {"type": "integer", "format": "int64"}),
            (str, {"type": "string"}),
            (datetime.datetime, {"type": "string", "format": "date-time"}),
            (None, {"type": "void"}),
        ],
    )
    def test_leaf_types(self, node, expected):
        assert self.dispatcher.classify(node) == expected

    def test_enumeration_typed_by_first_value(self):
        assert self.dispatcher.classify(Enumeration(("fi", "sv"))) == {"type": "string", "enum": ["fi", "sv"]}
        assert self.dispatcher.classify(Enumeration((1, 2))) == {
            "type": "integer",
            "format": "int64",
            "enum": [1, 2],
        }

    def test_enumeration_of_enum_members(self):
        assert self.dispatcher.classify(Enumeration((_Size.SMALL, _Size.LARGE))) == {
            "type": "string",
            "enum": ["s", "l"],
        }

    def test_maybe_is_transparent(self):
        assert self.dispatcher.classify(Maybe(LONG)) == self.dispatcher.classify(LONG)

    def test_either_uses_first_alternative(self):
        assert self.dispatcher.classify(Either((STRING, LONG))) == {"type": "string"}

    def test_eq_typed_by_value(self):
        assert self.dispatcher.classify(Eq(True)) == {"type": "boolean"}

    def test_list_and_set(self):
        assert self.dispatcher.classify(ListOf(LONG)) == {
            "type": "array",
            "items": {"type": "integer", "format": "int64"},
        }
        assert self.dispatcher.classify(SetOf(STRING)) == {
            "type": "array",
            "uniqueItems": True,
            "items": {"type": "string"},
        }

    def test_model_is_reference(self):
        assert self.dispatcher.classify(Model("User", {"id": LONG})) == {"$ref": "User"}

    def test_list_of_models(self):
        assert self.dispatcher.classify(ListOf(Model("User", {}))) == {
            "type": "array",
            "items": {"$ref": "User"},
        }

    def test_pydantic_class_is_reference(self):
        assert self.dispatcher.classify(_Point) == {"$ref": "_Point"}

    def test_unknown_raises(self):
        with pytest.raises(UnsupportedSchemaError, match="don't know how to create json-type"):
            self.dispatcher.classify(_Money)

    def test_unhashable_unknown_raises(self):
        with pytest.raises(UnsupportedSchemaError):
            self.dispatcher.classify({"id": LONG})

    def test_descriptors_are_fresh(self):
        first = self.dispatcher.classify(LONG)
        first["description"] = "changed"
        assert self.dispatcher.classify(LONG) == {"type": "integer", "format": "int64"}


# ---------------------------------------------------------------------------
# Top-level position
# ---------------------------------------------------------------------------


class TestTopLevel:
    def setup_method(self):
        self.dispatcher = TypeDispatcher()

    def test_model_at_top_is_type(self):
        assert self.dispatcher.classify(Model("User", {}), top=True) == {"type": "User"}

    def test_collection_at_top_keeps_ref(self):
        assert self.dispatcher.classify(ListOf(Model("User", {})), top=True) == {
            "type": "array",
            "items": {"$ref": "User"},
        }

    def test_primitive_at_top_unchanged(self):
        assert self.dispatcher.classify(STRING, top=True) == {"type": "string"}

    def test_none_at_top_is_void(self):
        assert self.dispatcher.classify(None, top=True) == {"type": "void"}

    def test_recursive_at_top(self):
        assert self.dispatcher.classify(Recursive("User"), top=True) == {"type": "User"}

    def test_maybe_model_at_top_is_type(self):
        user = Model("User", {"id": LONG})
        assert self.dispatcher.classify(Maybe(user), top=True) == self.dispatcher.classify(user, top=True)
        assert self.dispatcher.classify(Maybe(Maybe(user)), top=True) == {"type": "User"}

    def test_either_model_at_top_is_type(self):
        assert self.dispatcher.classify(Either((Model("User", {}), STRING)), top=True) == {"type": "User"}

    def test_maybe_inside_collection_keeps_ref(self):
        assert self.dispatcher.classify(ListOf(Maybe(Model("User", {}))), top=True) == {
            "type": "array",
            "items": {"$ref": "User"},
        }


# ---------------------------------------------------------------------------
# Recursive references
# ---------------------------------------------------------------------------


class TestRecursive:
    def setup_method(self):
        self.dispatcher = TypeDispatcher()
        self.user = Model("User", {"id": LONG, "friends": ListOf(Recursive("User"))})

    def test_without_registry_is_reference(self):
        assert self.dispatcher.classify(Recursive("User")) == {"$ref": "User"}

    def test_resolved_through_registry(self):
        registry = ModelRegistry([self.user])
        assert self.dispatcher.classify(Recursive("User"), registry=registry) == {"$ref": "User"}

    def test_unknown_target_raises(self):
        registry = ModelRegistry([self.user])
        with pytest.raises(UnsupportedSchemaError, match="unknown model"):
            self.dispatcher.classify(Recursive("Nobody"), registry=registry)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


class TestRegistration:
    def setup_method(self):
        self.dispatcher = TypeDispatcher()

    def test_register_class(self):
        self.dispatcher.register_class(_Money, lambda node, ctx: {"type": "string", "format": "money"})
        assert self.dispatcher.classify(_Money()) == {"type": "string", "format": "money"}

    def test_register_identity_as_decorator(self):
        @self.dispatcher.register_identity(_Money)
        def _money(node, ctx):
            return {"type": "string", "format": "money"}

        assert self.dispatcher.classify(_Money) == {"type": "string", "format": "money"}

    def test_identity_overrides_builtin(self):
        self.dispatcher.register_identity(KEYWORD, lambda node, ctx: {"type": "string", "format": "keyword"})
        assert self.dispatcher.classify(KEYWORD) == {"type": "string", "format": "keyword"}

    def test_subclass_matches_registered_base(self):
        class _Euro(_Money):
            pass

        self.dispatcher.register_class(_Money, lambda node, ctx: {"type": "string"})
        assert self.dispatcher.classify(_Euro()) == {"type": "string"}

    def test_fallback(self):
        self.dispatcher.register_fallback(
            lambda node: isinstance(node, tuple),
            lambda node, ctx: {"type": "array", "items": ctx.classify(node[0])},
        )
        assert self.dispatcher.classify((LONG,)) == {
            "type": "array",
            "items": {"type": "integer", "format": "int64"},
        }

    def test_nested_custom_type(self):
        self.dispatcher.register_class(_Money, lambda node, ctx: {"type": "string"})
        assert self.dispatcher.classify(ListOf(_Money())) == {"type": "array", "items": {"type": "string"}}

    def test_copy_is_independent(self):
        clone = self.dispatcher.copy()
        clone.register_class(_Money, lambda node, ctx: {"type": "string"})
        assert clone.classify(_Money()) == {"type": "string"}
        with pytest.raises(UnsupportedSchemaError):
            self.dispatcher.classify(_Money())

    def test_without_builtins(self):
        with pytest.raises(UnsupportedSchemaError):
            TypeDispatcher(builtins=False).classify(LONG)


class TestDefaultDispatcher:
    def test_same_instance(self):
        assert get_default_dispatcher() is get_default_dispatcher()
