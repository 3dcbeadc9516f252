# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Propcontainer Core Primitives

Error kinds, exceptions, settings and the name converters shared by the
container base class.
"""

from .enums import ContainerErrorKind
from .errors import ContainerError, UnknownPropertyError, UnknownSetterError
from .model import Model
from .naming import field_to_property, property_to_field, setter_name
from .settings import ContainerSettings

__all__ = [
    # Core models
    "Model",
    "ContainerSettings",
    # Errors
    "ContainerErrorKind",
    "ContainerError",
    "UnknownPropertyError",
    "UnknownSetterError",
    # Naming
    "field_to_property",
    "property_to_field",
    "setter_name",
]
