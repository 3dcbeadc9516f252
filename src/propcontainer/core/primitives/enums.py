# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ContainerErrorKind(str, Enum):
    """
    Closed set of failure kinds raised by containers.

    - UNKNOWN_PROPERTY: a key with no declared property was given to the
      constructor, or a read asked for a name outside the allow-list
    - UNKNOWN_SETTER: a declared property has no setter to hydrate it
    """

    UNKNOWN_PROPERTY = "unknown_property"
    UNKNOWN_SETTER = "unknown_setter"
