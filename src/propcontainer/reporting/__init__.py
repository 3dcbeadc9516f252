# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views over serialized containers.
"""

from .frame import containers_to_frame

__all__ = ["containers_to_frame"]
