"""Rendering of grouped diagnostic records into markers.

Each group becomes, in order: one detection box marker per channel, one
association line marker per channel, an existence probability label and a
track box marker. All markers of a group share the id derived from its uuid.
"""

from __future__ import annotations

from typing import Sequence

from tracks.types import InputChannel
from tracks.utils import uuid_to_int

from .config import DebuggerConfig
from .constants import (
    CHANNEL_COLOR_ALPHA,
    COLOR_PALETTE,
    DEFAULT_COLOR,
    NS_ASSOCIATION_LINES_PREFIX,
    NS_DETECT_BOXES_PREFIX,
    NS_EXISTENCE_PROBABILITY,
    NS_TRACK_BOXES,
    PALETTE_SIZE,
    TRACK_BOX_COLOR,
    UNASSOCIATED_TEXT_COLOR,
    UNASSOCIATED_TRACK_BOX_COLOR,
)
from .exceptions import ChannelIndexException, ChannelMismatchException
from .markers import (
    ColorRGBA,
    Header,
    Marker,
    MarkerAction,
    MarkerArray,
    MarkerType,
    Point,
    Vector3,
)
from .object_data import ObjectData


def get_channel_color(channel_index: int, alpha: float = CHANNEL_COLOR_ALPHA) -> ColorRGBA:
    """Get the palette color of a channel.

    Args:
        channel_index: Channel index; the palette repeats every 16 channels.
        alpha: Opacity.

    Returns:
        Channel color.
    """
    r, g, b = COLOR_PALETTE[channel_index % PALETTE_SIZE]
    return ColorRGBA(r, g, b, alpha)


def _to_percent(probability: float) -> int:
    return int(probability * 100)


def build_existence_label(
    object_data: ObjectData,
    channels_config: Sequence[InputChannel],
    config: DebuggerConfig | None = None,
) -> str:
    """Compose the existence probability label of a record.

    The label has a 'total:<pct>' line, a line of '<short_name><pct>' tokens
    joined by ':' for channels at or above the display threshold (left out when
    no channel qualifies), and the identity prefix.

    Args:
        object_data: Record to describe.
        channels_config: Channel configuration, in channel order.
        config: Rendering parameters.

    Returns:
        Multi-line label text.

    Raises:
        ChannelMismatchException: The existence vector does not have one entry per channel.
    """
    config = config or DebuggerConfig()
    if len(object_data.existence_vector) != len(channels_config):
        raise ChannelMismatchException(
            object_data.uuid_str, len(object_data.existence_vector), len(channels_config)
        )
    lines = [f"total:{_to_percent(object_data.total_existence_probability)}"]

    tokens = []
    for channel, probability in zip(channels_config, object_data.existence_vector):
        if probability < config.probability_display_threshold:
            continue
        tokens.append(f"{channel.short_name}{_to_percent(probability)}")
    if tokens:
        lines.append(":".join(tokens))

    lines.append(object_data.uuid_str[:config.uuid_prefix_length])
    return "\n".join(lines)


def _make_marker(
    anchor: ObjectData,
    frame_id: str,
    config: DebuggerConfig,
    ns: str,
    marker_type: MarkerType,
    scale: Vector3,
    color: ColorRGBA,
) -> Marker:
    return Marker(
        header=Header(frame_id=frame_id, stamp=anchor.time),
        ns=ns,
        id=uuid_to_int(anchor.uuid),
        type=marker_type,
        action=MarkerAction.ADD,
        scale=scale,
        color=color,
        lifetime=config.marker_lifetime,
    )


def draw_group(
    object_data_group: Sequence[ObjectData],
    channels_config: Sequence[InputChannel],
    frame_id: str,
    config: DebuggerConfig | None = None,
) -> list[Marker]:
    """Render the records of one object.

    Args:
        object_data_group: Records sharing one uuid; the first one anchors the group.
        channels_config: Channel configuration, in channel order.
        frame_id: Reference frame of all markers.
        config: Rendering parameters.

    Returns:
        Detection box markers, association line markers, label marker and track
        box marker, in that order.

    Raises:
        ChannelIndexException: An associated record refers to an unknown channel.
    """
    config = config or DebuggerConfig()
    anchor = object_data_group[0]
    channel_size = len(channels_config)

    text_marker = _make_marker(
        anchor, frame_id, config, NS_EXISTENCE_PROBABILITY, MarkerType.TEXT_VIEW_FACING,
        Vector3(0.0, 0.0, config.text_scale), ColorRGBA.from_tuple(DEFAULT_COLOR),
    )
    text_marker.position = Point.from_array(anchor.tracker_point, config.text_height_offset)
    text_marker.text = build_existence_label(anchor, channels_config, config)

    box_scale = config.track_box_scale
    track_boxes = _make_marker(
        anchor, frame_id, config, NS_TRACK_BOXES, MarkerType.CUBE_LIST,
        Vector3(box_scale, box_scale, box_scale), ColorRGBA.from_tuple(TRACK_BOX_COLOR),
    )

    detect_boxes_per_channel = []
    detect_lines_per_channel = []
    detect_scale = config.detect_box_scale
    for idx, channel in enumerate(channels_config):
        detect_boxes_per_channel.append(_make_marker(
            anchor, frame_id, config, NS_DETECT_BOXES_PREFIX + channel.short_name,
            MarkerType.CUBE_LIST, Vector3(detect_scale, detect_scale, detect_scale),
            get_channel_color(idx),
        ))
        detect_lines_per_channel.append(_make_marker(
            anchor, frame_id, config, NS_ASSOCIATION_LINES_PREFIX + channel.short_name,
            MarkerType.LINE_LIST, Vector3(config.line_width, 0.0, 0.0),
            get_channel_color(idx),
        ))

    track_height = config.track_height_offset
    detection_height = config.track_height_offset + config.assign_height_offset
    is_associated = False
    for object_data in object_data_group:
        track_boxes.points.append(Point.from_array(object_data.tracker_point, track_height))

        if not object_data.is_associated:
            continue
        is_associated = True

        channel_id = object_data.channel_id
        if not 0 <= channel_id < channel_size:
            raise ChannelIndexException(channel_id, channel_size)

        detect_boxes_per_channel[channel_id].points.append(
            Point.from_array(object_data.detection_point, detection_height)
        )
        detect_lines_per_channel[channel_id].points.extend([
            Point.from_array(object_data.tracker_point, track_height),
            Point.from_array(object_data.detection_point, detection_height),
        ])

    markers = []
    for marker in detect_boxes_per_channel + detect_lines_per_channel:
        if not marker.points:
            marker.action = MarkerAction.DELETE
        markers.append(marker)

    # coasting object: gray out the track box and text
    if not is_associated:
        track_boxes.color = ColorRGBA.from_tuple(UNASSOCIATED_TRACK_BOX_COLOR)
        text_marker.color = ColorRGBA.from_tuple(UNASSOCIATED_TEXT_COLOR)

    markers.append(text_marker)
    markers.append(track_boxes)
    return markers


def draw(
    object_data_groups: Sequence[Sequence[ObjectData]],
    channels_config: Sequence[InputChannel],
    frame_id: str,
    config: DebuggerConfig | None = None,
) -> MarkerArray:
    """Render all groups into one marker array.

    Args:
        object_data_groups: Groups in grouper order.
        channels_config: Channel configuration, in channel order.
        frame_id: Reference frame of all markers.
        config: Rendering parameters.

    Returns:
        MarkerArray with the markers of every non-empty group.
    """
    config = config or DebuggerConfig()
    marker_array = MarkerArray()
    for object_data_group in object_data_groups:
        if not object_data_group:
            continue
        marker_array.markers.extend(draw_group(object_data_group, channels_config, frame_id, config))
    return marker_array
