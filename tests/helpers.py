"""Shared test doubles for the debugger tests."""

from uuid import UUID

import numpy as np

from tracks import BaseTracker, DynamicObject, DynamicObjectList, load_channels_config


UUID_A = UUID("11111111-aaaa-4000-8000-000000000001")
UUID_B = UUID("22222222-bbbb-4000-8000-000000000002")
UUID_C = UUID("33333333-cccc-4000-8000-000000000003")


class StaticTracker(BaseTracker):
    """Tracker that stays where it was created."""

    def __init__(self, position, existence_probabilities, total_existence_probability, uuid=None):
        super().__init__(
            channel_size=len(existence_probabilities),
            uuid=uuid,
            existence_probabilities=existence_probabilities,
            total_existence_probability=total_existence_probability,
        )
        self.position = np.asarray(position, dtype=np.float64)
        self.queried_times = []

    def get_tracked_object(self, time):
        self.queried_times.append(time)
        return DynamicObject(uuid=self.uuid, position=self.position)

    def move_to(self, position):
        self.position = np.asarray(position, dtype=np.float64)


def make_channels(*short_names):
    return load_channels_config(
        [{"long_name": f"sensor_{name}", "short_name": name} for name in short_names]
    )


def make_detections(channel_index, *positions, timestamp=0.0):
    return DynamicObjectList(
        timestamp=timestamp,
        channel_index=channel_index,
        objects=[DynamicObject(uuid=UUID(int=i + 1000), position=p) for i, p in enumerate(positions)],
    )
