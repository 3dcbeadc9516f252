# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, Iterator, Optional, Set, Tuple

from pydantic_core import core_schema, to_json, to_jsonable_python

from ..primitives.errors import (
    ContainerError,
    UnknownPropertyError,
    UnknownSetterError,
)
from ..primitives.naming import field_to_property, property_to_field, setter_name
from ..primitives.settings import ContainerSettings
from .schema import ContainerSchema, resolve_schema

logger = logging.getLogger(__name__)


class AbstractContainer(ABC):
    """
    Base class for objects built from a mapping and read through an allow-list.

    Subclasses declare their properties as class annotations and provide one
    setter per property they accept from the constructor. The setter is either
    the conventional ``set`` + capitalized property name, or any method marked
    with ``@setter("<property>")``.

    Key behaviours:
    - The constructor routes every key of ``data`` through its setter, in the
      mapping's order. A key with no declared property raises
      ``UnknownPropertyError``; a declared property with no setter raises
      ``UnknownSetterError``. Setters already called are not undone.
    - ``get``/``has`` only see the allow-list: declared properties minus the
      names returned by ``get_hidden_property_names``.
    - ``serialize`` returns the allow-listed properties as a plain dict.

    Example:
        class Event(AbstractContainer):
            eventName: str
            _token: Optional[str] = None

            @classmethod
            def get_hidden_property_names(cls) -> Set[str]:
                return {"_token"}

            def setEventName(self, value: str) -> None:
                self.eventName = value

            def set_token(self, value: str) -> None:
                self._token = value

        event = Event({"eventName": "launch"})
        event.get("eventName")  # "launch"
        event.serialize()       # {"eventName": "launch"}
    """

    container_settings: ClassVar[ContainerSettings] = ContainerSettings()

    __properties: Tuple[str, ...]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Intermediate bases that leave the hidden set abstract are resolved
        # lazily by their concrete children
        if not getattr(cls.get_hidden_property_names, "__isabstractmethod__", False):
            resolve_schema(cls)

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self.__properties = resolve_schema(type(self)).properties
        self.hydrate(data or {})

    @classmethod
    @abstractmethod
    def get_hidden_property_names(cls) -> Set[str]:
        """
        Names of declared properties kept out of ``get``, ``has`` and
        ``serialize``. Return an empty set to expose every property.
        """

    @classmethod
    def container_schema(cls) -> ContainerSchema:
        return resolve_schema(cls)

    @classmethod
    def from_fields(cls, data: Mapping[str, Any]) -> "AbstractContainer":
        """Construct from dash-case keys, e.g. ``{"event-name": ...}``."""
        return cls({field_to_property(field): value for field, value in data.items()})

    def hydrate(self, data: Mapping[str, Any]) -> None:
        """Route each item of ``data`` through the setter of its property."""
        schema = resolve_schema(type(self))
        for field, value in data.items():
            if not schema.is_declared(field):
                logger.debug(f"{schema.owner} rejected unknown property '{field}'")
                raise UnknownPropertyError(field)

            method = schema.setters.get(field)
            if method is None:
                expected = setter_name(field, self.container_settings.setter_prefix)
                logger.debug(f"{schema.owner} has no setter {expected} for '{field}'")
                raise UnknownSetterError(field, expected)

            getattr(self, method)(value)

    # --- Name conversion ---

    @staticmethod
    def convert_field_to_property(field: str) -> str:
        return field_to_property(field)

    @staticmethod
    def convert_property_to_field(prop: str) -> str:
        return property_to_field(prop)

    # --- Controlled read access ---

    def get(self, name: str) -> Any:
        """Return the value of a readable property."""
        if name not in self.__properties:
            raise UnknownPropertyError(name)
        return getattr(self, name, None)

    def has(self, name: str) -> bool:
        return name in self.__properties

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__properties)

    # --- Serialization ---

    def serialize(self) -> Dict[str, Any]:
        """Return the readable properties and their current values."""
        return {name: getattr(self, name, None) for name in self.__properties}

    def to_fields(self) -> Dict[str, Any]:
        """Same as ``serialize`` with dash-case keys."""
        return {property_to_field(name): value for name, value in self.serialize().items()}

    def to_json(self, indent: Optional[int] = None) -> str:
        return to_json(self.serialize(), indent=indent, fallback=_encode_fallback).decode()

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self.serialize().items())
        return f"{type(self).__name__}({values})"

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_field, info_arg=True
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "AbstractContainer":
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(value)
            except ContainerError as e:
                raise ValueError(str(e)) from e
        raise ValueError(
            f"{cls.__name__} expects a mapping or a {cls.__name__} instance, "
            f"got {type(value).__name__}"
        )


def _encode_fallback(value: Any) -> Any:
    if isinstance(value, AbstractContainer):
        return value.serialize()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _unwrap_containers(value: Any) -> Any:
    # Python-mode dumps keep non-container values as they are
    if isinstance(value, AbstractContainer):
        return {name: _unwrap_containers(item) for name, item in value.serialize().items()}
    if isinstance(value, dict):
        return {key: _unwrap_containers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_unwrap_containers(item) for item in value]
    if type(value) is tuple:
        return tuple(_unwrap_containers(item) for item in value)
    return value


def _serialize_field(
    value: "AbstractContainer", info: core_schema.SerializationInfo
) -> Any:
    if info.mode_is_json():
        return to_jsonable_python(value.serialize(), fallback=_encode_fallback)
    return _unwrap_containers(value)
