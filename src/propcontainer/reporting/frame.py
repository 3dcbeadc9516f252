# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from ..core.base import AbstractContainer

logger = logging.getLogger(__name__)


def containers_to_frame(
    containers: Iterable[AbstractContainer], index: Optional[str] = None
) -> pd.DataFrame:
    """
    Tabulate the serialized form of each container, one row per container.

    Columns follow the union of the containers' readable properties in the
    order they are first seen. Containers that do not expose a column get NaN
    there.

    Args:
        containers: Containers to tabulate, possibly of different classes
        index: Optional readable property to use as the row index

    Returns:
        DataFrame of property values (empty when no containers are given)
    """
    records = [container.serialize() for container in containers]
    if not records:
        return pd.DataFrame()

    columns = list(dict.fromkeys(name for record in records for name in record))
    frame = pd.DataFrame.from_records(records, columns=columns)
    logger.debug(f"Tabulated {len(records)} containers into {len(columns)} columns")

    if index is not None:
        if index not in frame.columns:
            raise KeyError(f"Index property '{index}' is not readable on any container")
        frame = frame.set_index(index)
    return frame
