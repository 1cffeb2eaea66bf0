"""Debugger constants and error codes.

This module defines the channel color palette, marker namespaces and the
error codes used throughout the debugger.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for debugger precondition violations."""

    SUCCESS = 0
    UNKNOWN_ERROR = 1
    CHANNEL_SIZE_MISMATCH = 100
    CHANNEL_INDEX_OUT_OF_RANGE = 101
    ASSIGNMENT_INDEX_OUT_OF_RANGE = 102


ERROR_MESSAGES = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.UNKNOWN_ERROR: "Unknown error",
    ErrorCode.CHANNEL_SIZE_MISMATCH: "Existence vector does not match channel configuration",
    ErrorCode.CHANNEL_INDEX_OUT_OF_RANGE: "Channel index out of range",
    ErrorCode.ASSIGNMENT_INDEX_OUT_OF_RANGE: "Assignment refers to a missing detection",
}


def get_error_message(error_code: ErrorCode) -> str:
    """Get the default message for an error code.

    Args:
        error_code: The error code.

    Returns:
        Error message string.
    """
    return ERROR_MESSAGES.get(error_code, "Unknown error")


# Channel colors (r, g, b), cycled by channel index
COLOR_PALETTE = (
    (0.0, 0.0, 1.0),  # Blue
    (0.0, 1.0, 0.0),  # Green
    (1.0, 1.0, 0.0),  # Yellow
    (1.0, 0.0, 0.0),  # Red
    (0.0, 1.0, 1.0),  # Cyan
    (1.0, 0.0, 1.0),  # Magenta
    (1.0, 0.64, 0.0),  # Orange
    (0.75, 1.0, 0.0),  # Lime
    (0.0, 0.5, 0.5),  # Teal
    (0.5, 0.0, 0.5),  # Purple
    (1.0, 0.75, 0.8),  # Pink
    (0.65, 0.17, 0.17),  # Brown
    (0.5, 0.0, 0.0),  # Maroon
    (0.5, 0.5, 0.0),  # Olive
    (0.0, 0.0, 0.5),  # Navy
    (0.5, 0.5, 0.5),  # Grey
)
PALETTE_SIZE = len(COLOR_PALETTE)

# Marker namespaces
NS_EXISTENCE_PROBABILITY = "existence_probability"
NS_TRACK_BOXES = "track_boxes"
NS_DETECT_BOXES_PREFIX = "detect_boxes_"
NS_ASSOCIATION_LINES_PREFIX = "association_lines_"

# Colors (r, g, b, a)
DEFAULT_COLOR = (1.0, 1.0, 1.0, 1.0)
TRACK_BOX_COLOR = (1.0, 1.0, 1.0, 0.9)
UNASSOCIATED_TRACK_BOX_COLOR = (0.5, 0.5, 0.5, 0.8)
UNASSOCIATED_TEXT_COLOR = (0.5, 0.5, 0.5, 0.9)
CHANNEL_COLOR_ALPHA = 0.9
