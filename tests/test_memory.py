import mmap

import pytest

from algokit.memory import align_up, page_size


def test_align_up_worked_example():
    assert align_up(10, 4) == 12


def test_align_up_keeps_aligned_values():
    for value in (0, 4, 8, 64):
        assert align_up(value, 4) == value


@pytest.mark.parametrize("alignment", [1, 2, 4, 8, 16, 4096])
def test_align_up_invariants(alignment):
    for value in range(0, 3 * alignment + 5):
        result = align_up(value, alignment)
        assert result % alignment == 0
        assert value <= result < value + alignment


@pytest.mark.parametrize("alignment", [0, -4, 3, 6, 12])
def test_align_up_rejects_bad_alignment(alignment):
    with pytest.raises(ValueError):
        align_up(10, alignment)


def test_align_up_rejects_negative_value():
    with pytest.raises(ValueError):
        align_up(-1, 4)


def test_page_size_is_power_of_two():
    size = page_size()
    assert size == mmap.PAGESIZE
    assert size > 0 and size & (size - 1) == 0
    assert align_up(size + 1, size) == 2 * size