"""Per-cycle diagnostic records and their collection from tracker state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence
from uuid import UUID

import numpy as np

from tracks.base import BaseTracker
from tracks.types import DynamicObjectList

from .exceptions import AssignmentIndexException, ChannelIndexException, ChannelMismatchException


@dataclass
class ObjectData:
    """Diagnostic snapshot of one tracked object in one cycle.

    Attributes:
        uuid: Persistent object identity.
        uuid_str: Identity string reported by the tracker, used in labels.
        time: Cycle time in seconds.
        channel_id: Channel of the associated detection; meaningful only if associated.
        tracker_point: Estimated tracker position [x, y, z].
        detection_point: Associated detection position, or the tracker position when
            unassociated.
        is_associated: Whether a detection was matched this cycle.
        existence_vector: Per-channel existence probabilities.
        total_existence_probability: Overall existence probability.
    """

    uuid: UUID
    uuid_str: str
    time: float
    channel_id: int
    tracker_point: np.ndarray
    detection_point: np.ndarray
    is_associated: bool = False
    existence_vector: np.ndarray = field(default_factory=lambda: np.zeros(0))
    total_existence_probability: float = 0.0


def collect_object_data(
    message_time: float,
    list_tracker: Sequence[BaseTracker],
    detected_objects: DynamicObjectList,
    direct_assignment: Mapping[int, int],
    channel_size: int,
) -> list[ObjectData]:
    """Snapshot every tracker into an ObjectData record.

    Args:
        message_time: Cycle time the trackers are queried at.
        list_tracker: All live trackers, in tracker order.
        detected_objects: Detections of this cycle, tagged with one channel index.
        direct_assignment: Tracker position -> detection index, for matched trackers only.
        channel_size: Number of configured channels.

    Returns:
        One record per tracker, in tracker order.

    Raises:
        ChannelMismatchException: A tracker's existence vector does not have one entry per channel.
        ChannelIndexException: A tracker is associated but the detection channel is unknown.
        AssignmentIndexException: The assignment refers to a missing detection.
    """
    channel_id = detected_objects.channel_index
    object_data_list = []
    for tracker_idx, tracker in enumerate(list_tracker):
        tracked_object = tracker.get_tracked_object(message_time)
        uuid_str = tracker.get_uuid_string()

        tracker_point = np.array(tracked_object.position, dtype=np.float64)
        detection_idx = direct_assignment.get(tracker_idx)
        is_associated = detection_idx is not None
        if is_associated:
            if not 0 <= detection_idx < len(detected_objects):
                raise AssignmentIndexException(tracker_idx, detection_idx, len(detected_objects))
            if not 0 <= channel_id < channel_size:
                raise ChannelIndexException(channel_id, channel_size)
            associated_object = detected_objects.objects[detection_idx]
            detection_point = np.array(associated_object.position, dtype=np.float64)
        else:
            detection_point = tracker_point.copy()

        existence_vector = np.asarray(tracker.get_existence_probability_vector(), dtype=np.float64)
        if len(existence_vector) != channel_size:
            raise ChannelMismatchException(uuid_str, len(existence_vector), channel_size)

        object_data_list.append(
            ObjectData(
                uuid=tracked_object.uuid,
                uuid_str=uuid_str,
                time=message_time,
                channel_id=channel_id,
                tracker_point=tracker_point,
                detection_point=detection_point,
                is_associated=is_associated,
                existence_vector=existence_vector,
                total_existence_probability=float(tracker.get_total_existence_probability()),
            )
        )
    return object_data_list
