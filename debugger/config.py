"""Configuration for the tracker object debugger.

This module provides the marker geometry and labeling parameters.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class DebuggerConfig:
    """Rendering parameters for the tracker object debugger.

    Attributes:
        marker_lifetime: Marker lifetime hint in seconds; stale markers expire downstream.
        track_height_offset: Height added to tracker positions so boxes are not ground-occluded.
        assign_height_offset: Extra height added to associated detection positions.
        text_height_offset: Height of the label above the tracker position.
        text_scale: Text height.
        track_box_scale: Edge length of track boxes.
        detect_box_scale: Edge length of detection boxes.
        line_width: Width of association lines.
        probability_display_threshold: Channels below this probability are left out of labels.
        uuid_prefix_length: Number of identity characters shown in labels.
    """

    marker_lifetime: float = 0.15
    track_height_offset: float = 1.0
    assign_height_offset: float = 0.6
    text_height_offset: float = 2.5
    text_scale: float = 0.5
    track_box_scale: float = 0.4
    detect_box_scale: float = 0.2
    line_width: float = 0.15
    probability_display_threshold: float = 0.00101
    uuid_prefix_length: int = 6

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.marker_lifetime < 0.0:
            raise ValueError(f"marker_lifetime must be non-negative, got {self.marker_lifetime}")
        for name in ("text_scale", "track_box_scale", "detect_box_scale", "line_width"):
            value = getattr(self, name)
            if value <= 0.0:
                raise ValueError(f"{name} must be positive, got {value}")
        if not 0.0 <= self.probability_display_threshold <= 1.0:
            raise ValueError(
                f"probability_display_threshold must be in [0, 1], got {self.probability_display_threshold}"
            )
        if self.uuid_prefix_length <= 0:
            raise ValueError(f"uuid_prefix_length must be positive, got {self.uuid_prefix_length}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DebuggerConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary. Unknown keys are ignored.

        Returns:
            DebuggerConfig instance.
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered_data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
