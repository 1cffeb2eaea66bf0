"""Data types shared between the tracker and its consumers.

This module provides the detection containers and sensor channel descriptors
that the tracker exchanges with the debugger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator
from uuid import UUID

import numpy as np


@dataclass(frozen=True)
class InputChannel:
    """Descriptor of one configured detection source.

    Attributes:
        index: Position of the channel in the channel configuration.
        long_name: Human readable channel name, e.g. 'lidar_centerpoint'.
        short_name: Compact name used in marker labels and namespaces, e.g. 'Lc'.
    """

    index: int
    long_name: str
    short_name: str

    def __post_init__(self):
        """Validate channel fields."""
        if self.index < 0:
            raise ValueError(f"index must be non-negative, got {self.index}")
        if not self.short_name:
            raise ValueError("short_name must not be empty")

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int | None = None) -> InputChannel:
        """Create a channel from a dictionary.

        Args:
            data: Mapping with 'short_name' and optional 'long_name' / 'index'.
            index: Fallback index when the mapping does not carry one.

        Returns:
            InputChannel instance.
        """
        short_name = data["short_name"]
        return cls(
            index=int(data.get("index", index if index is not None else 0)),
            long_name=data.get("long_name", short_name),
            short_name=short_name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "long_name": self.long_name,
            "short_name": self.short_name,
        }


def load_channels_config(entries: Iterable[dict[str, Any] | InputChannel]) -> list[InputChannel]:
    """Build the ordered channel configuration.

    Args:
        entries: Channel mappings or InputChannel instances, in channel order.

    Returns:
        List of InputChannel whose position matches its index.
    """
    channels = []
    for position, entry in enumerate(entries):
        if isinstance(entry, InputChannel):
            channel = entry
        else:
            channel = InputChannel.from_dict(entry, index=position)
        if channel.index != position:
            raise ValueError(
                f"channel '{channel.short_name}' has index {channel.index} "
                f"but is configured at position {position}"
            )
        channels.append(channel)
    return channels


@dataclass
class DynamicObject:
    """Single object estimate, either a detection or a tracker output.

    Attributes:
        uuid: Persistent 128-bit object identity.
        position: Position [x, y, z] in the fixed frame.
    """

    uuid: UUID
    position: np.ndarray

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64).reshape(3)


@dataclass
class DynamicObjectList:
    """Detections of one cycle, all produced by a single channel.

    Attributes:
        timestamp: Measurement time in seconds.
        channel_index: Index of the originating channel.
        objects: Detected objects in detector order.
    """

    timestamp: float
    channel_index: int
    objects: list[DynamicObject] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[DynamicObject]:
        return iter(self.objects)
