import math
from string import ascii_lowercase

import pytest

from contestkit.league_basic import (
    feasible_positions,
    letter_mapping,
    pentagon_vertices,
    recover_operand,
)


def test_feasible_positions_small():
    assert feasible_positions(3) == "101"


@pytest.mark.parametrize("n", [1, 2, 5, 8, 13])
def test_feasible_positions_shape(n):
    flags = feasible_positions(n)
    assert len(flags) == n
    assert flags == flags[::-1]
    assert flags[0] == "1"
    assert set(flags) <= {"0", "1"}


def test_feasible_positions_invalid():
    with pytest.raises(ValueError):
        feasible_positions(0)


def test_letter_mapping_applies():
    source, target = "hello", "world"
    assert letter_mapping(source, target) is None
    source, target = "abc", "bca"
    mapping = letter_mapping(source, target)
    assert len(mapping) == 26
    assert "".join(mapping[ord(ch) - ord("a")] for ch in source) == target


def test_letter_mapping_empty_is_identity():
    assert letter_mapping("", "") == ascii_lowercase


def test_letter_mapping_length_mismatch():
    assert letter_mapping("ab", "a") is None


def test_letter_mapping_rejects_uppercase():
    with pytest.raises(ValueError):
        letter_mapping("A", "a")


def test_recover_operand_all_combinations():
    assert recover_operand("00001111", "00110011", "01010101") == "01111011"


def test_recover_operand_length():
    assert len(recover_operand("1010", "0110", "1100")) == 4


def test_recover_operand_mismatch():
    with pytest.raises(ValueError):
        recover_operand("10", "1", "10")


def test_pentagon_vertices_geometry():
    x, y, d = 2.0, -1.0, 3.0
    (xd, yd), (xb, yb), (xe, ye), (xc, yc) = pentagon_vertices(x, y, d)
    assert math.isclose(math.hypot(xc - x, yc - y), d)
    assert math.isclose(math.hypot(xd - x, yd - y), d)
    assert math.isclose(yc, yd)
    assert math.isclose(xc + xd, 2 * x, abs_tol=1e-9)
    assert math.isclose(yb, ye)
    assert math.isclose(xb + xe, 2 * x)
    assert math.isclose(xe - xb, d)


def test_pentagon_vertices_count():
    assert len(pentagon_vertices(0.0, 0.0, 1.0)) == 4