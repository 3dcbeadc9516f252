# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Propcontainer Core Framework

The container base class together with the primitives it is built on.
"""

from . import base, primitives
from .base import (
    AbstractContainer,
    ContainerSchema,
    compute_allow_list,
    declared_properties,
    resolve_schema,
    setter,
)
from .primitives import (
    ContainerError,
    ContainerErrorKind,
    ContainerSettings,
    Model,
    UnknownPropertyError,
    UnknownSetterError,
    field_to_property,
    property_to_field,
)

__all__ = [
    "base",
    "primitives",
    # Base
    "AbstractContainer",
    "ContainerSchema",
    "compute_allow_list",
    "declared_properties",
    "resolve_schema",
    "setter",
    # Primitives
    "ContainerError",
    "ContainerErrorKind",
    "ContainerSettings",
    "Model",
    "UnknownPropertyError",
    "UnknownSetterError",
    "field_to_property",
    "property_to_field",
]
