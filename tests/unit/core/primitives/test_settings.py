# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from propcontainer.core.primitives import ContainerSettings


def test_container_settings_default_instantiation():
    """Test that ContainerSettings can be instantiated with default values."""
    settings = ContainerSettings()
    assert settings.setter_prefix == "set"
    assert settings.require_setters is False


def test_container_settings_custom_instantiation():
    settings = ContainerSettings(setter_prefix="assign", require_setters=True)
    assert settings.setter_prefix == "assign"
    assert settings.require_setters is True


def test_container_settings_rejects_empty_prefix():
    """An empty prefix would make every property its own setter."""
    with pytest.raises(ValidationError):
        ContainerSettings(setter_prefix="")


def test_container_settings_forbids_extra_fields():
    with pytest.raises(ValidationError):
        ContainerSettings(setter_prefx="set")


def test_container_settings_is_frozen():
    settings = ContainerSettings()
    with pytest.raises(ValidationError):
        settings.require_setters = True
