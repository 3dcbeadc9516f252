# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-type property schema for containers.

A container's readable properties and its setter registry depend only on the
concrete class, so both are worked out once per class and cached here. The
cache is keyed by the runtime class, which keeps sibling subclasses with
different hidden sets from seeing each other's allow-lists.
"""

from __future__ import annotations

import inspect
import logging
import re
import weakref
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Dict,
    FrozenSet,
    Iterable,
    Optional,
    Tuple,
    Type,
    TypeVar,
    get_origin,
)

from ..primitives.errors import UnknownPropertyError, UnknownSetterError
from ..primitives.model import Model
from ..primitives.naming import setter_name

if TYPE_CHECKING:  # pragma: no cover
    from .container import AbstractContainer

logger = logging.getLogger(__name__)

# Mangled name of the allow-list attribute every container instance carries
BOOKKEEPING_FIELD = "_AbstractContainer__properties"

_SETTER_MARKER = "__container_setter__"

# Matches ClassVar, typing.ClassVar, t.ClassVar[...] and similar string annotations
_CLASS_VAR_STRING = re.compile(r"^(?:\w+\.)*ClassVar(?:\[|$)")

F = TypeVar("F", bound=Callable[..., Any])

_SCHEMA_CACHE: "weakref.WeakKeyDictionary[type, ContainerSchema]" = (
    weakref.WeakKeyDictionary()
)


class ContainerSchema(Model):
    """
    Resolved property layout of one concrete container class.

    Attributes:
        owner: Qualified name of the class the schema was built for
        declared: Every declared instance property, hidden ones included
        hidden: Names the class asked to keep out of reads and serialization
        properties: The allow-list, in declaration order
        setters: Property name to setter method name
    """

    owner: str
    declared: Tuple[str, ...]
    hidden: FrozenSet[str]
    properties: Tuple[str, ...]
    setters: Dict[str, str]

    def is_declared(self, name: str) -> bool:
        return name in self.declared

    def is_readable(self, name: str) -> bool:
        return name in self.properties


def setter(prop: str) -> Callable[[F], F]:
    """
    Register the decorated method as the setter for ``prop``.

    Explicit registrations take precedence over the conventional
    ``set<Name>`` lookup:

        class Event(AbstractContainer):
            event_name: str

            @setter("event_name")
            def rename(self, value: str) -> None:
                self.event_name = value.strip()
    """

    def decorator(func: F) -> F:
        setattr(func, _SETTER_MARKER, prop)
        return func

    return decorator


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _CLASS_VAR_STRING.search(annotation) is not None
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _is_private(klass: type, name: str) -> bool:
    # Double-underscore annotations are stored under their mangled name
    return name.startswith("__") or name.startswith(
        f"_{klass.__name__.lstrip('_')}__"
    )


def declared_properties(cls: type) -> Tuple[str, ...]:
    """
    List the instance properties declared anywhere in ``cls``'s MRO.

    Properties are class annotations that are neither ``ClassVar`` nor
    private. Base-class declarations come first; a redeclaration in a subclass
    keeps the position of the original.
    """
    names: Dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, annotation in inspect.get_annotations(klass).items():
            if _is_class_var(annotation) or _is_private(klass, name):
                continue
            names.setdefault(name, None)
    return tuple(names)


def compute_allow_list(cls: type, hidden_names: Iterable[str]) -> Tuple[str, ...]:
    """
    Compute the externally readable property names of ``cls``.

    Args:
        cls: The concrete (most-derived) container class
        hidden_names: Property names the class keeps out of reads

    Returns:
        Declared properties minus the bookkeeping field and the hidden names
    """
    excluded = {BOOKKEEPING_FIELD, *hidden_names}
    return tuple(name for name in declared_properties(cls) if name not in excluded)


def _resolve_setters(
    cls: type, declared: Tuple[str, ...], prefix: str
) -> Dict[str, str]:
    explicit: Dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        for attr_name, attr in vars(klass).items():
            prop = getattr(attr, _SETTER_MARKER, None)
            if prop is None:
                continue
            if prop not in declared:
                raise UnknownPropertyError(
                    prop,
                    f"Unknown property: {prop}. "
                    f"'{klass.__qualname__}.{attr_name}' is registered as its setter.",
                )
            explicit[prop] = attr_name

    setters: Dict[str, str] = {}
    for prop in declared:
        if prop in explicit:
            setters[prop] = explicit[prop]
            continue
        conventional = setter_name(prop, prefix)
        if callable(getattr(cls, conventional, None)):
            setters[prop] = conventional
    return setters


def build_schema(cls: Type["AbstractContainer"]) -> ContainerSchema:
    """Build the schema of ``cls`` without consulting the cache."""
    settings = cls.container_settings
    hidden = frozenset(cls.get_hidden_property_names())
    declared = declared_properties(cls)
    properties = compute_allow_list(cls, hidden)
    setters = _resolve_setters(cls, declared, settings.setter_prefix)

    unknown_hidden = hidden.difference(declared)
    if unknown_hidden:
        logger.debug(
            f"{cls.__qualname__} hides undeclared properties: {sorted(unknown_hidden)}"
        )

    if settings.require_setters:
        for prop in properties:
            if prop not in setters:
                raise UnknownSetterError(prop, setter_name(prop, settings.setter_prefix))

    return ContainerSchema(
        owner=cls.__qualname__,
        declared=declared,
        hidden=hidden,
        properties=properties,
        setters=setters,
    )


def resolve_schema(cls: Type["AbstractContainer"]) -> ContainerSchema:
    """Return the cached schema of ``cls``, building it on first use."""
    schema: Optional[ContainerSchema] = _SCHEMA_CACHE.get(cls)
    if schema is None:
        schema = build_schema(cls)
        _SCHEMA_CACHE[cls] = schema
        logger.debug(
            f"Resolved container schema for {schema.owner}: "
            f"{len(schema.properties)} readable of {len(schema.declared)} declared"
        )
    return schema
