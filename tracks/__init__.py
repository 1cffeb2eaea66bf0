"""Tracker-side interfaces consumed by the debugger.

This module provides the tracker capability, detection containers, sensor
channel descriptors and identity helpers.

Example usage:
    from tracks import BaseTracker, DynamicObject, load_channels_config

    channels = load_channels_config([{"short_name": "Lc"}, {"short_name": "Rd"}])

    class StaticTracker(BaseTracker):
        def __init__(self, position, **kwargs):
            super().__init__(channel_size=len(channels), **kwargs)
            self.position = position

        def get_tracked_object(self, time):
            return DynamicObject(uuid=self.uuid, position=self.position)
"""

from .base import BaseTracker
from .types import DynamicObject, DynamicObjectList, InputChannel, load_channels_config
from .utils import uuid_to_int, uuid_to_string

__all__ = [
    # Tracker
    "BaseTracker",
    # Data types
    "DynamicObject",
    "DynamicObjectList",
    "InputChannel",
    "load_channels_config",
    # Identity helpers
    "uuid_to_int",
    "uuid_to_string",
]
