# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from propcontainer.core.primitives import ContainerErrorKind


def test_enum_member_values():
    """Test that the error kinds have the expected string values."""
    assert ContainerErrorKind.UNKNOWN_PROPERTY == "unknown_property"
    assert ContainerErrorKind.UNKNOWN_SETTER == "unknown_setter"


def test_error_kinds_are_closed():
    assert {kind.name for kind in ContainerErrorKind} == {
        "UNKNOWN_PROPERTY",
        "UNKNOWN_SETTER",
    }
