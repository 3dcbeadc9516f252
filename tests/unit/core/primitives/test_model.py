# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from propcontainer.core.base import ContainerSchema
from propcontainer.core.primitives import ContainerSettings, Model


def _schema(**overrides) -> ContainerSchema:
    fields = dict(
        owner="Event",
        declared=("eventName", "_token"),
        hidden=frozenset({"_token"}),
        properties=("eventName",),
        setters={"eventName": "setEventName"},
    )
    fields.update(overrides)
    return ContainerSchema(**fields)


def test_records_share_the_base_model():
    assert issubclass(ContainerSchema, Model)
    assert issubclass(ContainerSettings, Model)


def test_schema_record_is_frozen():
    """Resolved schemas are shared by every instance of a class and must not change."""
    schema = _schema()
    with pytest.raises(ValidationError):
        schema.properties = ("eventName", "_token")


def test_schema_record_forbids_extra_fields():
    with pytest.raises(ValidationError):
        _schema(readable=("eventName",))


def test_schema_record_coerces_collections():
    schema = _schema(declared=["eventName", "_token"], hidden={"_token"})
    assert schema.declared == ("eventName", "_token")
    assert schema.hidden == frozenset({"_token"})


def test_settings_copy_with_updates():
    """Test model_copy() with an override, leaving the original untouched."""
    base = ContainerSettings()
    strict = base.model_copy(update={"require_setters": True})

    assert base != strict
    assert strict.require_setters is True
    assert strict.setter_prefix == base.setter_prefix == "set"
