"""Tests for rendering grouped records into markers.

This module tests label composition, palette coloring, marker ordering,
per-channel delete markers and the de-emphasis of coasting objects.
"""

import sys
from pathlib import Path
from uuid import UUID

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(Path(__file__).parent))

from debugger import (
    COLOR_PALETTE,
    ChannelIndexException,
    ChannelMismatchException,
    DebuggerConfig,
    MarkerAction,
    MarkerType,
    ObjectData,
    build_existence_label,
    draw,
    draw_group,
    get_channel_color,
)
from tracks import uuid_to_int
from helpers import UUID_A, UUID_B, make_channels


GRAY_BOX = (0.5, 0.5, 0.5, 0.8)
GRAY_TEXT = (0.5, 0.5, 0.5, 0.9)


def make_record(
    uuid_value=UUID_A,
    tracker_point=(1.0, 2.0, 0.0),
    detection_point=None,
    channel_id=0,
    existence_vector=(0.9, 0.05),
    total=0.5,
    time=10.0,
):
    tracker_point = np.array(tracker_point, dtype=np.float64)
    is_associated = detection_point is not None
    if detection_point is None:
        detection_point = tracker_point.copy()
    return ObjectData(
        uuid=uuid_value,
        uuid_str=uuid_value.hex,
        time=time,
        channel_id=channel_id,
        tracker_point=tracker_point,
        detection_point=np.array(detection_point, dtype=np.float64),
        is_associated=is_associated,
        existence_vector=np.array(existence_vector, dtype=np.float64),
        total_existence_probability=total,
    )


@pytest.fixture
def channels():
    return make_channels("Lc", "Rd")


def split_markers(markers, channel_size):
    """Split one group's markers into (boxes, lines, text, track_boxes)."""
    boxes = markers[:channel_size]
    lines = markers[channel_size:2 * channel_size]
    return boxes, lines, markers[2 * channel_size], markers[2 * channel_size + 1]


class TestChannelColor:
    """Test cases for palette lookup."""

    def test_palette_order(self):
        """Test the fixed palette order."""
        assert len(COLOR_PALETTE) == 16
        assert COLOR_PALETTE[0] == (0.0, 0.0, 1.0)
        assert COLOR_PALETTE[1] == (0.0, 1.0, 0.0)
        assert COLOR_PALETTE[2] == (1.0, 1.0, 0.0)
        assert COLOR_PALETTE[3] == (1.0, 0.0, 0.0)
        assert COLOR_PALETTE[6] == (1.0, 0.64, 0.0)
        assert COLOR_PALETTE[11] == (0.65, 0.17, 0.17)
        assert COLOR_PALETTE[15] == (0.5, 0.5, 0.5)

    def test_palette_wraps(self):
        """Test channel indices cycle through the palette."""
        assert get_channel_color(17).to_tuple() == get_channel_color(1).to_tuple()
        assert get_channel_color(16).to_tuple() == (0.0, 0.0, 1.0, 0.9)

    def test_custom_alpha(self):
        """Test the alpha component can be overridden."""
        assert get_channel_color(3, alpha=0.5).to_tuple() == (1.0, 0.0, 0.0, 0.5)


# Expected labels follow the token rule: every channel above 0.001 gets a
# "<short_name><pct>" token, tokens share one ":"-joined line between the
# total line and the identity prefix.


class TestExistenceLabel:
    """Test cases for label composition."""

    def test_total_and_channels(self, channels):
        """Test the total line, channel tokens and identity prefix."""
        record = make_record(existence_vector=(0.9, 0.05), total=0.5)
        assert build_existence_label(record, channels) == "total:50\nLc90:Rd5\n111111"

    def test_associated_scenario(self, channels):
        """Test the label of a well-supported object."""
        record = make_record(existence_vector=(0.1, 0.8), total=0.85)
        assert build_existence_label(record, channels) == "total:85\nLc10:Rd80\n111111"

    def test_low_probability_channels_omitted(self, channels):
        """Test channels at or below 0.001 are left out."""
        record = make_record(existence_vector=(0.001, 0.7), total=0.7)
        label = build_existence_label(record, channels)
        assert "Lc" not in label
        assert label == "total:70\nRd70\n111111"

    def test_no_channel_line_when_all_omitted(self, channels):
        """Test the channel line disappears when no channel qualifies."""
        record = make_record(existence_vector=(0.0, 0.0005), total=0.5)
        assert build_existence_label(record, channels) == "total:50\n111111"

    def test_no_trailing_separator(self, channels):
        """Test no line ends with the token separator."""
        record = make_record(existence_vector=(0.4, 0.0), total=0.4)
        label = build_existence_label(record, channels)
        assert all(not line.endswith(":") for line in label.split("\n")[1:])
        assert not label.endswith(":")

    def test_percentages_truncated(self, channels):
        """Test percentages drop the fractional part."""
        record = make_record(existence_vector=(0.999, 0.5), total=0.999)
        assert build_existence_label(record, channels).startswith("total:99\nLc99:Rd50")

    def test_configurable_prefix_length(self, channels):
        """Test the identity prefix length follows the configuration."""
        record = make_record(total=0.5)
        label = build_existence_label(record, channels, DebuggerConfig(uuid_prefix_length=8))
        assert label.endswith("\n11111111")

    def test_vector_size_mismatch(self, channels):
        """Test a short vector fails instead of being truncated."""
        record = make_record(existence_vector=(0.9,))
        with pytest.raises(ChannelMismatchException):
            build_existence_label(record, channels)


class TestDrawGroup:
    """Test cases for rendering one object."""

    def test_marker_count_and_order(self, channels):
        """Test boxes, lines, text then track boxes per group."""
        markers = draw_group([make_record()], channels, "map")
        assert len(markers) == 2 * len(channels) + 2
        boxes, lines, text, track_boxes = split_markers(markers, len(channels))
        assert [m.ns for m in boxes] == ["detect_boxes_Lc", "detect_boxes_Rd"]
        assert [m.ns for m in lines] == ["association_lines_Lc", "association_lines_Rd"]
        assert text.ns == "existence_probability"
        assert track_boxes.ns == "track_boxes"
        assert all(m.type == MarkerType.CUBE_LIST for m in boxes)
        assert all(m.type == MarkerType.LINE_LIST for m in lines)
        assert text.type == MarkerType.TEXT_VIEW_FACING
        assert track_boxes.type == MarkerType.CUBE_LIST

    def test_shared_header_id_and_lifetime(self, channels):
        """Test every marker carries the group id, frame, stamp and lifetime."""
        markers = draw_group([make_record(time=42.0)], channels, "map")
        expected_id = uuid_to_int(UUID_A)
        for marker in markers:
            assert marker.id == expected_id
            assert marker.header.frame_id == "map"
            assert marker.header.stamp == 42.0
            assert marker.lifetime == pytest.approx(0.15)

    def test_unassociated_scenario(self, channels):
        """Test a coasting object: all channels deleted, gray box and text."""
        record = make_record(existence_vector=(0.9, 0.05), total=0.5)
        markers = draw_group([record], channels, "map")
        boxes, lines, text, track_boxes = split_markers(markers, len(channels))

        assert all(m.action == MarkerAction.DELETE for m in boxes + lines)
        assert track_boxes.action == MarkerAction.ADD
        assert track_boxes.color.to_tuple() == GRAY_BOX
        assert text.color.to_tuple() == GRAY_TEXT
        assert text.text == "total:50\nLc90:Rd5\n111111"

    def test_associated_scenario(self, channels):
        """Test an object associated to channel 1."""
        record = make_record(
            detection_point=(1.5, 2.5, 0.2),
            channel_id=1,
            existence_vector=(0.1, 0.8),
            total=0.85,
        )
        markers = draw_group([record], channels, "map")
        boxes, lines, text, track_boxes = split_markers(markers, len(channels))

        assert boxes[0].action == MarkerAction.DELETE
        assert lines[0].action == MarkerAction.DELETE
        assert boxes[1].action == MarkerAction.ADD
        assert lines[1].action == MarkerAction.ADD
        assert len(boxes[1].points) == 1
        assert len(lines[1].points) == 2

        box = boxes[1].points[0]
        assert (box.x, box.y, box.z) == pytest.approx((1.5, 2.5, 1.8))
        start, end = lines[1].points
        assert (start.x, start.y, start.z) == pytest.approx((1.0, 2.0, 1.0))
        assert (end.x, end.y, end.z) == pytest.approx((1.5, 2.5, 1.8))

        assert boxes[1].color.to_tuple() == (0.0, 1.0, 0.0, 0.9)
        assert lines[1].color.to_tuple() == (0.0, 1.0, 0.0, 0.9)
        assert track_boxes.color.to_tuple() == (1.0, 1.0, 1.0, 0.9)
        assert text.color.to_tuple() == (1.0, 1.0, 1.0, 1.0)
        assert text.text == "total:85\nLc10:Rd80\n111111"

    def test_track_boxes_per_record(self, channels):
        """Test one raised track box per record in collection order."""
        group = [
            make_record(tracker_point=(0.0, 0.0, 0.0), time=1.0),
            make_record(tracker_point=(1.0, 0.0, 0.5), time=1.1),
            make_record(tracker_point=(2.0, 0.0, 1.0), time=1.2),
        ]
        track_boxes = draw_group(group, channels, "map")[-1]
        assert [p.x for p in track_boxes.points] == pytest.approx([0.0, 1.0, 2.0])
        assert [p.z for p in track_boxes.points] == pytest.approx([1.0, 1.5, 2.0])
        assert (track_boxes.scale.x, track_boxes.scale.y, track_boxes.scale.z) == pytest.approx((0.4, 0.4, 0.4))

    def test_point_counts_match_associations(self, channels):
        """Test n associations on a channel give n boxes and 2n line points."""
        group = [
            make_record(detection_point=(0.0, 1.0, 0.0), channel_id=0),
            make_record(),
            make_record(detection_point=(0.0, 2.0, 0.0), channel_id=0),
            make_record(detection_point=(0.0, 3.0, 0.0), channel_id=1),
        ]
        boxes, lines, _, track_boxes = split_markers(draw_group(group, channels, "map"), len(channels))
        assert [len(m.points) for m in boxes] == [2, 1]
        assert [len(m.points) for m in lines] == [4, 2]
        assert len(track_boxes.points) == 4
        assert all(m.action == MarkerAction.ADD for m in boxes + lines)

    def test_label_uses_first_record(self, channels):
        """Test the first record anchors the label and its position."""
        group = [
            make_record(tracker_point=(1.0, 2.0, 0.0), total=0.3, existence_vector=(0.3, 0.0)),
            make_record(tracker_point=(9.0, 9.0, 0.0), total=0.9, existence_vector=(0.9, 0.0)),
        ]
        text = draw_group(group, channels, "map")[2 * len(channels)]
        assert text.text.startswith("total:30\n")
        assert (text.position.x, text.position.y, text.position.z) == pytest.approx((1.0, 2.0, 2.5))
        assert text.scale.z == pytest.approx(0.5)

    def test_associated_channel_out_of_range(self, channels):
        """Test an unknown channel on an associated record fails loudly."""
        record = make_record(detection_point=(0.0, 0.0, 0.0), channel_id=-1)
        with pytest.raises(ChannelIndexException):
            draw_group([record], channels, "map")

    def test_custom_offsets(self, channels):
        """Test geometry offsets follow the configuration."""
        config = DebuggerConfig(track_height_offset=2.0, assign_height_offset=1.0, marker_lifetime=0.5)
        record = make_record(tracker_point=(0.0, 0.0, 0.0), detection_point=(1.0, 0.0, 0.0), channel_id=0)
        markers = draw_group([record], channels, "map", config)
        assert markers[0].points[0].z == pytest.approx(3.0)
        assert markers[-1].points[0].z == pytest.approx(2.0)
        assert all(m.lifetime == pytest.approx(0.5) for m in markers)


class TestDraw:
    """Test cases for rendering all groups."""

    def test_empty_groups(self, channels):
        """Test no groups yield no markers."""
        assert len(draw([], channels, "map")) == 0

    def test_empty_group_skipped(self, channels):
        """Test an empty group contributes nothing."""
        assert len(draw([[]], channels, "map")) == 0

    def test_groups_in_order(self, channels):
        """Test group markers are emitted group by group."""
        groups = [[make_record(uuid_value=UUID_A)], [make_record(uuid_value=UUID_B)]]
        marker_array = draw(groups, channels, "map")
        per_group = 2 * len(channels) + 2
        assert len(marker_array) == 2 * per_group
        assert {m.id for m in marker_array.markers[:per_group]} == {uuid_to_int(UUID_A)}
        assert {m.id for m in marker_array.markers[per_group:]} == {uuid_to_int(UUID_B)}

    def test_many_channels_cycle_palette(self):
        """Test channels beyond the palette size reuse palette colors."""
        channels = make_channels(*[f"c{i}" for i in range(18)])
        record = make_record(existence_vector=[0.5] * 18, detection_point=(0.0, 0.0, 0.0), channel_id=17)
        boxes = draw_group([record], channels, "map")[:18]
        assert boxes[17].color.to_tuple() == boxes[1].color.to_tuple()
        assert boxes[17].action == MarkerAction.ADD
