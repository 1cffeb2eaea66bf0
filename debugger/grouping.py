"""Grouping of diagnostic records by object identity."""

from __future__ import annotations

from typing import Sequence

from .object_data import ObjectData


def group_object_data(object_data_list: Sequence[ObjectData]) -> list[list[ObjectData]]:
    """Partition records into groups sharing one uuid.

    Records are stable-sorted by uuid, so a group keeps the order in which its
    records were collected, and groups come out in ascending uuid order.

    Args:
        object_data_list: Records accumulated since the last reset.

    Returns:
        List of non-empty groups.
    """
    if not object_data_list:
        return []

    object_data_groups = []
    object_data_group: list[ObjectData] = []
    previous_uuid = None
    for object_data in sorted(object_data_list, key=lambda data: data.uuid):
        if object_data_group and object_data.uuid != previous_uuid:
            object_data_groups.append(object_data_group)
            object_data_group = []
        object_data_group.append(object_data)
        previous_uuid = object_data.uuid
    object_data_groups.append(object_data_group)
    return object_data_groups
