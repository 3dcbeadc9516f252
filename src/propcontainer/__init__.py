# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Propcontainer - typed property containers with allow-listed read access

Subclass ``AbstractContainer``, declare properties as annotations, write one
setter per property, and list the properties that must stay private.

Example Usage:
    ```python
    from propcontainer import AbstractContainer

    class Event(AbstractContainer):
        eventName: str

        @classmethod
        def get_hidden_property_names(cls):
            return set()

        def setEventName(self, value):
            self.eventName = value

    event = Event({"eventName": "launch"})
    event.serialize()  # {"eventName": "launch"}
    ```
"""

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import (  # noqa: E402
    AbstractContainer,
    ContainerError,
    ContainerErrorKind,
    ContainerSchema,
    ContainerSettings,
    UnknownPropertyError,
    UnknownSetterError,
    field_to_property,
    property_to_field,
    setter,
)

# Public API surface; submodules are lazy-loaded on first attribute access
__all__ = [  # noqa: F822 - lazy loading
    "AbstractContainer",
    "ContainerError",
    "ContainerErrorKind",
    "ContainerSchema",
    "ContainerSettings",
    "UnknownPropertyError",
    "UnknownSetterError",
    "field_to_property",
    "property_to_field",
    "setter",
    "core",
    "reporting",
]


_LAZY_MODULES = {
    "core": "propcontainer.core",
    "reporting": "propcontainer.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propcontainer' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
