# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import ClassVar, List, Optional, Set

import pytest

from propcontainer.core import AbstractContainer


class Event(AbstractContainer):
    """Container with one hidden property and one property lacking a setter."""

    calls: ClassVar[List[str]] = []

    eventName: Optional[str] = None
    venue: Optional[str] = None
    attendees: int = 0
    notes: Optional[str] = None
    _token: Optional[str] = None

    @classmethod
    def get_hidden_property_names(cls) -> Set[str]:
        return {"_token"}

    def setEventName(self, value: str) -> None:
        self.calls.append("eventName")
        self.eventName = value

    def setVenue(self, value: str) -> None:
        self.calls.append("venue")
        self.venue = value

    def setAttendees(self, value) -> None:
        self.calls.append("attendees")
        self.attendees = int(value)

    def set_token(self, value: str) -> None:
        self.calls.append("_token")
        self._token = value


@pytest.fixture
def event_cls():
    Event.calls.clear()
    return Event


@pytest.fixture
def event(event_cls) -> Event:
    return event_cls({"eventName": "launch", "venue": "Hall A", "_token": "s3cr3t"})
