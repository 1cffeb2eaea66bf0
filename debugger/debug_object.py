"""Tracker object debugger.

Collects a diagnostic snapshot of every tracker each cycle, groups the
snapshots by object identity and renders them into markers that show
association, existence probability and per-channel contribution.

Example usage:
    from debugger import TrackerObjectDebugger
    from tracks import load_channels_config

    channels = load_channels_config([
        {"long_name": "lidar_centerpoint", "short_name": "Lc"},
        {"long_name": "camera_lidar_fusion", "short_name": "LCf"},
    ])
    debugger = TrackerObjectDebugger("map", channels)

    # once per sub-step
    debugger.collect(time, trackers, detections, direct_assignment)

    # once per cycle
    marker_array = debugger.finalize()
    debugger.reset()
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from tracks.base import BaseTracker
from tracks.types import DynamicObjectList, InputChannel
from utils import Logger

from .config import DebuggerConfig
from .exceptions import DebuggerException
from .grouping import group_object_data
from .markers import MarkerArray
from .object_data import ObjectData, collect_object_data
from .visualize import draw


class TrackerObjectDebugger:
    """Diagnostic marker generator for a multi-object tracker.

    Not thread-safe: the cycle driver must serialize calls.

    Attributes:
        frame_id: Reference frame of the generated markers.
        config: Rendering parameters.
    """

    def __init__(
        self,
        frame_id: str,
        channels_config: Sequence[InputChannel],
        config: Optional[DebuggerConfig] = None,
    ):
        """Initialize the debugger.

        Args:
            frame_id: Reference frame of the generated markers.
            channels_config: Channel configuration, fixed for the debugger lifetime.
            config: Rendering parameters; defaults are used when omitted.
        """
        self.frame_id = frame_id
        self.config = config or DebuggerConfig()
        self._channels_config = tuple(channels_config)

        self._is_initialized = False
        self._message_time = 0.0
        self._object_data_list: list[ObjectData] = []
        self._object_data_groups: list[list[ObjectData]] = []
        self._markers = MarkerArray()

        self._log = Logger.get_logging_method("DEBUGGER")
        self._log_debug = Logger.get_logging_method("DEBUGGER", level=logging.DEBUG)
        self._log_error = Logger.get_logging_method("DEBUGGER", level=logging.ERROR)

        channel_names = ", ".join(channel.short_name for channel in self._channels_config)
        self._log(
            f"Tracker object debugger initialized in '{frame_id}' "
            f"with {len(self._channels_config)} channels [{channel_names}]"
        )

    @property
    def is_initialized(self) -> bool:
        """Whether data has been collected at least once."""
        return self._is_initialized

    @property
    def channels_config(self) -> tuple[InputChannel, ...]:
        return self._channels_config

    @property
    def message_time(self) -> float:
        """Cycle time of the latest collect call."""
        return self._message_time

    @property
    def object_data_list(self) -> list[ObjectData]:
        return list(self._object_data_list)

    @property
    def object_data_groups(self) -> list[list[ObjectData]]:
        return [list(group) for group in self._object_data_groups]

    @property
    def markers(self) -> MarkerArray:
        """Markers of the latest render, until the next reset."""
        return MarkerArray(markers=list(self._markers.markers))

    def reset(self) -> None:
        """Clear accumulated records, groups and markers."""
        self._object_data_list.clear()
        self._object_data_groups.clear()
        self._markers.clear()
        self._log_debug("Debugger reset")

    def collect(
        self,
        message_time: float,
        list_tracker: Sequence[BaseTracker],
        detected_objects: DynamicObjectList,
        direct_assignment: Mapping[int, int],
        reverse_assignment: Optional[Mapping[int, int]] = None,
    ) -> None:
        """Append one diagnostic record per tracker.

        Args:
            message_time: Cycle time the trackers are queried at.
            list_tracker: All live trackers, in tracker order.
            detected_objects: Detections of this cycle, tagged with one channel index.
            direct_assignment: Tracker position -> detection index.
            reverse_assignment: Detection index -> tracker position; unused.

        Raises:
            DebuggerException: Tracker or assignment data violates the channel configuration.
        """
        self._is_initialized = True
        self._message_time = message_time

        try:
            object_data_list = collect_object_data(
                message_time,
                list_tracker,
                detected_objects,
                direct_assignment,
                len(self._channels_config),
            )
        except DebuggerException as e:
            self._log_error(f"Collect failed at t={message_time:.3f}: {e.message}")
            raise

        self._object_data_list.extend(object_data_list)
        self._log_debug(
            f"Collected {len(object_data_list)} trackers from channel "
            f"{detected_objects.channel_index} at t={message_time:.3f}"
        )

    def process(self) -> list[list[ObjectData]]:
        """Group the accumulated records by object identity.

        Returns:
            The groups, in ascending uuid order; empty when nothing was collected.
        """
        if not self._is_initialized:
            return []

        self._object_data_groups = group_object_data(self._object_data_list)
        self._log_debug(
            f"Grouped {len(self._object_data_list)} records into "
            f"{len(self._object_data_groups)} objects"
        )
        return self.object_data_groups

    def get_message(self) -> MarkerArray:
        """Render the current groups.

        Returns:
            Markers of all groups; empty when never initialized or nothing is grouped.
        """
        if not self._is_initialized or not self._object_data_groups:
            return MarkerArray()

        self._markers = draw(self._object_data_groups, self._channels_config, self.frame_id, self.config)
        return MarkerArray(markers=list(self._markers.markers))

    def finalize(self) -> MarkerArray:
        """Group the accumulated records and render them."""
        self.process()
        return self.get_message()
