# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model


class ContainerSettings(Model):
    """
    Per-class configuration for container hydration.

    Subclasses override the defaults through a class variable:

        class Event(AbstractContainer):
            container_settings: ClassVar[ContainerSettings] = ContainerSettings(
                require_setters=True
            )
    """

    setter_prefix: str = Field(
        default="set",
        min_length=1,
        description="Prefix joined to the capitalized property name to find its setter.",
    )
    require_setters: bool = Field(
        default=False,
        description=(
            "If True, a concrete class whose readable properties lack setters "
            "fails when the class is defined instead of during hydration."
        ),
    )
