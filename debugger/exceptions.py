"""Custom exceptions for the debugger.

Raised when upstream tracker data violates the channel configuration. Missing
data is never an error; the debugger simply emits nothing.
"""

from .constants import ErrorCode, get_error_message


class DebuggerException(Exception):
    """Base exception for debugger errors."""

    def __init__(
        self,
        message: str = "",
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    ):
        self.error_code = error_code
        self.message = message or get_error_message(error_code)
        super().__init__(self.message)

    def to_dict(self):
        """Convert to dictionary for diagnostics output."""
        return {
            "ErrCode": int(self.error_code),
            "ErrMsg": self.message,
        }


class ChannelMismatchException(DebuggerException):
    """Exception raised when an existence vector length differs from the channel count."""

    def __init__(self, uuid_str: str, vector_size: int, channel_size: int):
        self.uuid_str = uuid_str
        self.vector_size = vector_size
        self.channel_size = channel_size
        super().__init__(
            message=(
                f"Existence vector of tracker {uuid_str[:6]} has {vector_size} entries, "
                f"expected {channel_size}"
            ),
            error_code=ErrorCode.CHANNEL_SIZE_MISMATCH
        )


class ChannelIndexException(DebuggerException):
    """Exception raised when an associated record refers to an unknown channel."""

    def __init__(self, channel_id: int, channel_size: int):
        self.channel_id = channel_id
        self.channel_size = channel_size
        super().__init__(
            message=f"Channel index {channel_id} out of range for {channel_size} channels",
            error_code=ErrorCode.CHANNEL_INDEX_OUT_OF_RANGE
        )


class AssignmentIndexException(DebuggerException):
    """Exception raised when an assignment points outside the detection list."""

    def __init__(self, tracker_idx: int, detection_idx: int, detection_size: int):
        self.tracker_idx = tracker_idx
        self.detection_idx = detection_idx
        self.detection_size = detection_size
        super().__init__(
            message=(
                f"Tracker {tracker_idx} assigned to detection {detection_idx}, "
                f"but only {detection_size} detections exist"
            ),
            error_code=ErrorCode.ASSIGNMENT_INDEX_OUT_OF_RANGE
        )
