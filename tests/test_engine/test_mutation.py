"""Tests for the mutation gateway and mirror synchronization."""

from __future__ import annotations

from dataclasses import replace

import pytest

from balance_coach.engine import mutation
from balance_coach.engine.shapes import find_shape, make_shape
from balance_coach.utils.geometry import snap
from tests.conftest import BOARD, linked, rectangle, square

PAIR_FIELDS = ("width", "height", "shade", "weight", "saturation")


def _assert_mirrored(shapes, shape_id):
    a = find_shape(shapes, shape_id)
    b = find_shape(shapes, a.mirror_id)
    for attr in PAIR_FIELDS:
        assert getattr(a, attr) == getattr(b, attr), attr
    assert a.x + b.x + a.width == BOARD.width
    assert a.y == b.y


class TestUpdateShape:
    def test_propagates_only_mirrored_fields(self):
        shapes = linked(square("a", 100, 100))
        result = mutation.update_shape(shapes, "a", x=0, y=0, width=80, shade=5, id="zzz")
        a = find_shape(result, "zzz")
        twin = find_shape(result, "a-mirror")
        assert (a.x, a.y, a.width, a.shade) == (0, 0, 80, 5)
        assert twin.width == 80 and twin.shade == 5
        assert twin.x == 600 and twin.y == 100
        assert twin.id == "a-mirror"

    def test_unlinked_shape_updates_alone(self):
        shapes = [square("a", 0, 0), square("b", 200, 0)]
        result = mutation.update_shape(shapes, "a", shade=2)
        assert find_shape(result, "a").shade == 2
        assert find_shape(result, "b") == shapes[1]

    def test_unknown_id_is_noop(self):
        shapes = [square("a", 0, 0)]
        assert mutation.update_shape(shapes, "nope", shade=2) is shapes

    def test_input_list_untouched(self):
        shapes = linked(square("a", 100, 100))
        mutation.update_shape(shapes, "a", width=40)
        assert shapes[0].width == 100 and shapes[1].width == 100


class TestDelete:
    def test_removes_both_partners(self):
        shapes = linked(square("a", 100, 100)) + [square("b", 0, 300)]
        result = mutation.delete_shape(shapes, "a-mirror")
        assert [s.id for s in result] == ["b"]

    def test_challenge_shape_is_protected(self):
        shapes = [make_shape("c", "square", 100, 1, 0, 0, is_challenge=True)]
        assert mutation.delete_shape(shapes, "c") is shapes

    def test_unknown_id_is_noop(self):
        shapes = [square("a", 0, 0)]
        assert mutation.delete_shape(shapes, "nope") is shapes


class TestRotate:
    def test_rotates_about_center_and_snaps(self):
        shapes = [rectangle("r", 100, 100)]  # 50 wide, 100 tall
        [r] = mutation.rotate_shape(shapes, "r", BOARD)
        assert (r.width, r.height) == (100, 50)
        assert r.x == snap(125 - 50)
        assert r.y == snap(150 - 25)
        assert r.weight == shapes[0].weight

    def test_rotate_twice_restores_footprint(self):
        shapes = [rectangle("r", 120, 100)]
        once = mutation.rotate_shape(shapes, "r", BOARD)
        twice = mutation.rotate_shape(once, "r", BOARD)
        r = twice[0]
        assert (r.width, r.height) == (50, 100)

    def test_rejected_when_crossing_fulcrum(self):
        shapes = [rectangle("r", 340, 100)]  # rotated and snapped: spans 320..420
        assert mutation.rotate_shape(shapes, "r", BOARD) is shapes

    def test_rejected_on_collision(self):
        shapes = [rectangle("r", 100, 100), square("block", 160, 100, size=40)]
        assert mutation.rotate_shape(shapes, "r", BOARD) is shapes

    def test_rejected_into_floor_band(self):
        # lying flat just above the floor; standing up would sink into the band
        shapes = [replace(rectangle("r", 100, 400), width=100, height=50)]
        assert mutation.rotate_shape(shapes, "r", BOARD) is shapes

    def test_accepted_when_clear_of_floor(self):
        shapes = [rectangle("r", 100, 360)]
        [r] = mutation.rotate_shape(shapes, "r", BOARD)
        assert (r.width, r.height) == (100, 50)
        assert r.y + r.height <= BOARD.floor_y

    def test_squares_and_challenge_shapes_do_not_rotate(self):
        shapes = [square("s", 0, 0), make_shape("c", "rectangle", 100, 1, 200, 0, is_challenge=True)]
        assert mutation.rotate_shape(shapes, "s", BOARD) is shapes
        assert mutation.rotate_shape(shapes, "c", BOARD) is shapes

    def test_rotates_mirror_pair_in_step(self):
        shapes = linked(rectangle("r", 100, 100))
        result = mutation.rotate_shape(shapes, "r", BOARD)
        assert result is not shapes
        assert find_shape(result, "r").width == 100
        _assert_mirrored(result, "r")


class TestResize:
    def test_resize_recenters_and_recomputes_weight(self):
        shapes = [square("s", 100, 100, size=100, shade=3)]
        [s] = mutation.resize_shape(shapes, "s", 140, BOARD)
        assert (s.width, s.height) == (140, 140)
        assert s.x == snap(150 - 70) and s.y == snap(150 - 70)
        assert s.weight == pytest.approx(140 * 140 / 100 * 1.5)
        assert s.saturation == shapes[0].saturation

    def test_off_grid_size_ignored(self):
        shapes = [square("s", 100, 100)]
        assert mutation.resize_shape(shapes, "s", 110, BOARD) is shapes

    def test_rejected_when_it_would_cross_fulcrum(self):
        shapes = [square("s", 300, 100, size=100)]
        assert mutation.resize_shape(shapes, "s", 160, BOARD) is shapes

    def test_rotated_rectangle_keeps_orientation(self):
        shapes = [replace(rectangle("r", 100, 100), width=100, height=50)]
        [r] = mutation.resize_shape(shapes, "r", 160, BOARD)
        assert (r.width, r.height) == (160, 80)

    def test_resizes_mirror_pair(self):
        shapes = linked(square("s", 100, 100, size=100, shade=2))
        result = mutation.resize_shape(shapes, "s-mirror", 120, BOARD)
        assert find_shape(result, "s").width == 120
        _assert_mirrored(result, "s")

    def test_challenge_shape_locked(self):
        shapes = [make_shape("c", "square", 100, 1, 0, 0, is_challenge=True)]
        assert mutation.resize_shape(shapes, "c", 120, BOARD) is shapes


class TestShade:
    def test_shade_updates_weight_and_saturation_for_pair(self):
        shapes = linked(square("s", 100, 100, size=100, shade=1))
        result = mutation.set_shade(shapes, "s", 5)
        s = find_shape(result, "s")
        assert s.shade == 5
        assert s.weight == 200
        assert s.saturation == 1.0
        _assert_mirrored(result, "s")

    def test_challenge_shape_locked(self):
        shapes = [make_shape("c", "square", 100, 1, 0, 0, is_challenge=True)]
        assert mutation.set_shade(shapes, "c", 4) is shapes


class TestMove:
    def test_moves_snapped(self):
        shapes = [square("s", 0, 0)]
        [s] = mutation.move_shape(shapes, "s", 47, 92, BOARD)
        assert (s.x, s.y) == (40, 100)

    def test_clamps_to_board_and_floor(self):
        shapes = [square("s", 0, 0)]
        [s] = mutation.move_shape(shapes, "s", 5000, 5000, BOARD)
        assert s.x == BOARD.width - 100
        assert s.y == BOARD.floor_y - 100
        [s] = mutation.move_shape(shapes, "s", -300, 40, BOARD)
        assert (s.x, s.y) == (0, 40)

    def test_pushed_off_fulcrum_toward_center_side(self):
        shapes = [square("s", 0, 0)]
        [left] = mutation.move_shape(shapes, "s", 320, 0, BOARD)  # center 370 < 400
        assert left.x == 300
        [right] = mutation.move_shape(shapes, "s", 360, 0, BOARD)  # center 410 ≥ 400
        assert right.x == 400

    def test_blocked_by_collision(self):
        shapes = [square("s", 0, 0), square("b", 200, 0)]
        assert mutation.move_shape(shapes, "s", 160, 0, BOARD) is shapes

    def test_unchanged_position_is_noop(self):
        shapes = [square("s", 40, 40)]
        assert mutation.move_shape(shapes, "s", 45, 35, BOARD) is shapes

    def test_moves_mirror_twin(self):
        shapes = linked(square("s", 100, 100))
        result = mutation.move_shape(shapes, "s", 200, 40, BOARD)
        twin = find_shape(result, "s-mirror")
        assert (twin.x, twin.y) == (500, 40)
        _assert_mirrored(result, "s")

    def test_mirror_target_collision_blocks_pair(self):
        shapes = linked(square("s", 100, 100)) + [square("b", 480, 0)]
        assert mutation.move_shape(shapes, "s", 200, 40, BOARD) is shapes

    def test_challenge_shape_cannot_move(self):
        shapes = [make_shape("c", "square", 100, 1, 0, 0, is_challenge=True)]
        assert mutation.move_shape(shapes, "c", 100, 100, BOARD) is shapes
