"""Visual primitives produced by the debugger.

The types mirror a visualization marker message: every marker carries a
namespace, a numeric id, a type, an add/delete action, a color, a lifetime
and either points or text. ``to_dict`` gives the transport a plain structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Sequence

import numpy as np


class MarkerType(IntEnum):
    """Supported primitive types."""

    LINE_LIST = 5
    CUBE_LIST = 6
    TEXT_VIEW_FACING = 9


class MarkerAction(IntEnum):
    """Marker actions."""

    ADD = 0
    DELETE = 2


@dataclass
class Point:
    """3D point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, position: Sequence[float] | np.ndarray, z_offset: float = 0.0) -> Point:
        """Create a point from an [x, y, z] array, optionally raised by ``z_offset``."""
        return cls(float(position[0]), float(position[1]), float(position[2]) + z_offset)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass
class Vector3:
    """Marker scale."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass
class ColorRGBA:
    """Color with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def from_tuple(cls, rgba: Sequence[float]) -> ColorRGBA:
        return cls(*rgba)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_dict(self) -> Dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass
class Header:
    """Reference frame and stamp of a marker."""

    frame_id: str = ""
    stamp: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"frame_id": self.frame_id, "stamp": self.stamp}


@dataclass
class Marker:
    """Single visual primitive.

    Attributes:
        header: Frame and stamp.
        ns: Namespace; (ns, id) identifies the marker for overwrite and delete.
        id: Numeric marker id.
        type: Primitive type.
        action: ADD or DELETE.
        position: Pose position; for list types the points are absolute.
        scale: Primitive size.
        color: Primitive color.
        lifetime: Seconds until a downstream renderer drops the marker.
        points: Geometry for list types.
        text: Content for text markers.
    """

    header: Header = field(default_factory=Header)
    ns: str = ""
    id: int = 0
    type: MarkerType = MarkerType.CUBE_LIST
    action: MarkerAction = MarkerAction.ADD
    position: Point = field(default_factory=Point)
    scale: Vector3 = field(default_factory=Vector3)
    color: ColorRGBA = field(default_factory=ColorRGBA)
    lifetime: float = 0.0
    points: List[Point] = field(default_factory=list)
    text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "header": self.header.to_dict(),
            "ns": self.ns,
            "id": self.id,
            "type": int(self.type),
            "action": int(self.action),
            "position": self.position.to_dict(),
            "scale": self.scale.to_dict(),
            "color": self.color.to_dict(),
            "lifetime": self.lifetime,
            "points": [p.to_dict() for p in self.points],
            "text": self.text,
        }


@dataclass
class MarkerArray:
    """Ordered collection of markers forming one scene."""

    markers: List[Marker] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.markers)

    def append(self, marker: Marker) -> None:
        self.markers.append(marker)

    def clear(self) -> None:
        self.markers.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {"markers": [m.to_dict() for m in self.markers]}
