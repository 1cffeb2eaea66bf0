"""Diagnostic visualization for multi-object tracking.

Collects per-cycle tracker snapshots, groups them by object identity and
renders them into per-channel colored markers.
"""

from .config import DebuggerConfig
from .constants import COLOR_PALETTE, PALETTE_SIZE, ErrorCode
from .debug_object import TrackerObjectDebugger
from .exceptions import (
    AssignmentIndexException,
    ChannelIndexException,
    ChannelMismatchException,
    DebuggerException,
)
from .grouping import group_object_data
from .markers import ColorRGBA, Header, Marker, MarkerAction, MarkerArray, MarkerType, Point, Vector3
from .object_data import ObjectData, collect_object_data
from .visualize import build_existence_label, draw, draw_group, get_channel_color

__all__ = [
    # Debugger
    "TrackerObjectDebugger",
    "DebuggerConfig",
    # Pipeline stages
    "ObjectData",
    "collect_object_data",
    "group_object_data",
    "draw",
    "draw_group",
    "build_existence_label",
    "get_channel_color",
    # Markers
    "Marker",
    "MarkerArray",
    "MarkerType",
    "MarkerAction",
    "Point",
    "Vector3",
    "ColorRGBA",
    "Header",
    # Constants
    "COLOR_PALETTE",
    "PALETTE_SIZE",
    "ErrorCode",
    # Exceptions
    "DebuggerException",
    "ChannelMismatchException",
    "ChannelIndexException",
    "AssignmentIndexException",
]
