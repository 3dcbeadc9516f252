# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Case translation between markup-style field names and property names.

The two transforms are best-effort and not inverses of each other: runs of
capitals, leading capitals and digits next to letters are left as the regular
expressions happen to treat them.
"""

from __future__ import annotations

import re

_DASH_CHAR = re.compile(r"-(\w)")
_LOWER_UPPER = re.compile(r"(?<=[a-z])([A-Z])")


def field_to_property(field: str) -> str:
    """
    Convert a dash-separated field name to camelCase.

    Example:
        >>> field_to_property("event-name")
        'eventName'
    """
    return _DASH_CHAR.sub(lambda match: match.group(1).upper(), field)


def property_to_field(prop: str) -> str:
    """
    Convert a camelCase property name to dash-separated form.

    Example:
        >>> property_to_field("eventName")
        'event-name'
    """
    return _LOWER_UPPER.sub(lambda match: "-" + match.group(1).lower(), prop)


def setter_name(prop: str, prefix: str = "set") -> str:
    """Conventional setter method name: prefix plus the name with its first letter capitalized."""
    return prefix + prop[:1].upper() + prop[1:]
