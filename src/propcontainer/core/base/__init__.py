# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Container base class and its per-type schema resolution.
"""

from .container import AbstractContainer
from .schema import (
    BOOKKEEPING_FIELD,
    ContainerSchema,
    compute_allow_list,
    declared_properties,
    resolve_schema,
    setter,
)

__all__ = [
    "AbstractContainer",
    "BOOKKEEPING_FIELD",
    "ContainerSchema",
    "compute_allow_list",
    "declared_properties",
    "resolve_schema",
    "setter",
]
