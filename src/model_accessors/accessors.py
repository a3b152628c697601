# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Accessor Core
Map conversion and synthesized get/set accessors for declared model fields.
"""

from functools import lru_cache
from types import MethodType
from typing import Any, Callable, Dict, Iterable, Mapping, NamedTuple, Optional, Self, Tuple

from model_accessors.exceptions import MissingFieldError, UnknownOperationError
from model_accessors.naming import OPERATION_PATTERN, getter_name, setter_name, to_accessor_form, to_field_form
from model_accessors.utils.logger import logger


class FieldAccessor(NamedTuple):
    field: str
    accessor: str
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], Any]


class AccessorTable(NamedTuple):
    fields: Dict[str, FieldAccessor]
    # "getCreatedAt" -> ("get", <created_at accessor>)
    operations: Dict[str, Tuple[str, FieldAccessor]]


def _synthesized_getter(field: str) -> Callable[[Any], Any]:
    def getter(self: Any) -> Any:
        return getattr(self, field)

    getter.__name__ = getter_name(field)
    return getter


def _synthesized_setter(field: str) -> Callable[[Any, Any], Any]:
    def setter(self: Any, value: Any) -> Any:
        setattr(self, field, value)
        return self

    setter.__name__ = setter_name(field)
    return setter


@lru_cache(maxsize=None)
def accessor_table(model_cls: type) -> AccessorTable:
    """
    Builds the accessor table for a model class.
    Hand-written accessors defined on the class win over synthesized ones.
    """
    fields: Dict[str, FieldAccessor] = {}
    operations: Dict[str, Tuple[str, FieldAccessor]] = {}

    for field in model_cls.declared_fields():  # type: ignore[attr-defined]
        get_name, set_name = getter_name(field), setter_name(field)
        entry = FieldAccessor(
            field=field,
            accessor=to_accessor_form(field),
            getter=getattr(model_cls, get_name, None) or _synthesized_getter(field),
            setter=getattr(model_cls, set_name, None) or _synthesized_setter(field),
        )
        fields[field] = entry
        operations[get_name] = ("get", entry)
        operations[set_name] = ("set", entry)

    logger.debug(f"Built accessor table for {model_cls.__name__} with {len(fields)} fields")
    return AccessorTable(fields=fields, operations=operations)


class AccessorMixin:
    """
    Dynamic accessor layer shared by all model flavors.

    Subclasses declare their fields (see `declared_fields`) and get, for every
    field `created_at`:
    - `getCreatedAt()` / `setCreatedAt(value)` unless hand-written,
    - `createdAt` attribute-style read/write routed through those accessors,
    - participation in `to_map` / `load_from_map`.
    """

    @classmethod
    def declared_fields(cls) -> Tuple[str, ...]:
        raise NotImplementedError(f"{cls.__name__} does not declare its fields")

    @classmethod
    def create_new(cls) -> Self:
        return cls()

    def to_map(self) -> Dict[str, Any]:
        table = accessor_table(type(self))
        return {field: entry.getter(self) for field, entry in table.fields.items()}

    def load_from_map(self, data: Mapping[str, Any], allowed_keys: Optional[Iterable[str]] = None) -> Self:
        """
        Populates fields from a mapping keyed by field names.
        Keys outside `allowed_keys` are skipped; any other unknown key raises
        MissingFieldError before a single value is applied.
        """
        allowed = None if allowed_keys is None else set(allowed_keys)

        updates = []
        for key, value in data.items():
            if allowed is not None and key not in allowed:
                logger.debug(f"Skipping key '{key}' not allowed on {type(self).__name__}")
                continue
            updates.append((self._resolve_setter(key), value))

        for setter, value in updates:
            setter(self, value)
        return self

    def invoke(self, operation: str, *args: Any) -> Any:
        """
        Fallback dispatch of a named operation.

        A bare field name returns the field's value. Otherwise the name must be
        `get<Field>` or `set<Field>`; `set` stores its single argument and
        returns the instance.
        """
        table = accessor_table(type(self))
        if operation in table.fields:
            return getattr(self, operation)

        match = OPERATION_PATTERN.match(operation)
        if match is None:
            raise UnknownOperationError(operation, type(self).__name__)

        verb, suffix = match.groups()
        field = to_field_form(suffix)
        if field not in table.fields:
            raise MissingFieldError(type(self).__name__, field)

        if verb == "set":
            if len(args) != 1:
                raise TypeError(f"{operation}() takes exactly one value ({len(args)} given)")
            table.fields[field].setter(self, args[0])
            return self
        return table.fields[field].getter(self)

    def _resolve_setter(self, key: str) -> Callable[[Any, Any], Any]:
        table = accessor_table(type(self))
        resolved = table.operations.get(f"set{to_accessor_form(key)}")
        if resolved is not None:
            return resolved[1].setter

        field = to_field_form(to_accessor_form(key))
        if field not in table.fields:
            raise MissingFieldError(type(self).__name__, field)
        return table.fields[field].setter

    def _resolve_field(self, name: str) -> FieldAccessor:
        table = accessor_table(type(self))
        field = to_field_form(name)
        if field not in table.fields:
            raise MissingFieldError(type(self).__name__, field)
        return table.fields[field]

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            parent = getattr(super(), "__getattr__", None)
            if parent is None:
                raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
            return parent(name)

        table = accessor_table(type(self))
        if name in table.fields:
            # Declared but never assigned
            raise AttributeError(f"Field '{name}' of {type(self).__name__} has no value")

        resolved = table.operations.get(name)
        if resolved is not None:
            verb, entry = resolved
            return MethodType(entry.getter if verb == "get" else entry.setter, self)

        field = to_field_form(name)
        if field in table.fields:
            return table.fields[field].getter(self)

        match = OPERATION_PATTERN.match(name)
        if match is not None:
            verb, suffix = match.groups()
            entry = self._resolve_field(suffix)
            return MethodType(entry.getter if verb == "get" else entry.setter, self)

        raise MissingFieldError(type(self).__name__, field)

    def __setattr__(self, name: str, value: Any) -> None:
        # Bare field names store directly; hand-written setters write through this path
        if name.startswith("_") or hasattr(type(self), name) or name in accessor_table(type(self)).fields:
            super().__setattr__(name, value)
            return
        self._resolve_field(name).setter(self, value)

    def __str__(self) -> str:
        table = accessor_table(type(self))
        field = "name" if "name" in table.fields else "id"
        if field not in table.fields:
            raise MissingFieldError(type(self).__name__, field)

        value = table.fields[field].getter(self)
        return "" if value is None else str(value)
