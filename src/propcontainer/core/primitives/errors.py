# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Container exceptions.

Both kinds carry the offending name as structured context so callers can
branch on ``error.kind`` and ``error.name`` instead of parsing messages.
"""

from __future__ import annotations

from typing import Optional

from .enums import ContainerErrorKind


class ContainerError(Exception):
    """Base class for all container failures."""

    kind: ContainerErrorKind

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        super().__init__(message or self._default_message())

    def _default_message(self) -> str:
        return f"{self.kind.value}: {self.name}"


class UnknownPropertyError(ContainerError):
    """Raised for a name that is not a declared (or not a readable) property."""

    kind = ContainerErrorKind.UNKNOWN_PROPERTY

    def _default_message(self) -> str:
        return f"Unknown property: {self.name}."


class UnknownSetterError(ContainerError):
    """Raised when a declared property has no setter to receive its value."""

    kind = ContainerErrorKind.UNKNOWN_SETTER

    def __init__(
        self, name: str, setter: str, message: Optional[str] = None
    ) -> None:
        self.setter = setter
        super().__init__(name, message)

    def _default_message(self) -> str:
        return f"Setter missing: {self.setter} (property '{self.name}')."
