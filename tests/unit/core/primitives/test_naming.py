# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from propcontainer.core.primitives import (
    field_to_property,
    property_to_field,
    setter_name,
)


class TestFieldToProperty:
    """Dash-case to camelCase."""

    def test_single_dash(self):
        assert field_to_property("event-name") == "eventName"

    def test_multiple_dashes(self):
        assert field_to_property("event-start-date") == "eventStartDate"

    def test_no_dash_is_unchanged(self):
        assert field_to_property("venue") == "venue"

    def test_empty_string(self):
        assert field_to_property("") == ""


class TestPropertyToField:
    """camelCase to dash-case."""

    def test_single_boundary(self):
        assert property_to_field("eventName") == "event-name"

    def test_multiple_boundaries(self):
        assert property_to_field("eventStartDate") == "event-start-date"

    def test_lowercase_is_unchanged(self):
        assert property_to_field("venue") == "venue"


@pytest.mark.parametrize(
    "prop, prefix, expected",
    [
        ("eventName", "set", "setEventName"),
        ("venue", "set", "setVenue"),
        ("_token", "set", "set_token"),
        ("venue", "assign", "assignVenue"),
    ],
)
def test_setter_name(prop, prefix, expected):
    assert setter_name(prop, prefix) == expected
