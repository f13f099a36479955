from compendium.components.cursor import Cursor
from compendium.utils.cursor import advance, clamp


def test_advance_always_lands_in_bounds():
    for length in range(1, 6):
        for index in range(-2, length + 4):
            for direction in (1, -1):
                result = advance(index, direction, length)
                assert 0 <= result < length, (index, direction, length, result)


def test_advance_wraps_forward_and_backward():
    assert advance(4, 1, 5) == 0
    assert advance(0, -1, 5) == 4
    assert advance(2, 1, 5) == 3
    assert advance(2, -1, 5) == 1


def test_single_element_collection_always_yields_zero():
    for index in (0, 1, 7):
        assert advance(index, 1, 1) == 0
        assert advance(index, -1, 1) == 0


def test_stale_index_is_reset_before_stepping():
    # Collection shrank from 10 rows to 3 between frames.
    assert advance(8, 1, 3) == 1
    assert advance(8, -1, 3) == 2


def test_empty_collection_is_a_no_op():
    assert advance(0, 1, 0) == 0
    assert advance(4, -1, 0) == 4


def test_clamp_soft_resets_out_of_range_indices():
    assert clamp(2, 5) == 2
    assert clamp(5, 5) == 0
    assert clamp(-1, 5) == 0
    assert clamp(3, 0) == 0


def test_cursor_step_records_fresh_length():
    cursor = Cursor()
    assert not cursor.active
    moved = cursor.step(-1, 4)
    assert moved == Cursor(index=3, length=4)
    assert moved.active
    # Stepping returns a new value; the old cursor is unchanged.
    assert cursor == Cursor(index=0, length=0)


def test_cursor_resolved_against_shorter_collection():
    cursor = Cursor(index=6, length=8)
    assert cursor.resolved(8) == 6
    assert cursor.resolved(3) == 0
