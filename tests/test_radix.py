"""Tests for epid.core.radix module.

Tests mixed-radix composition, decomposition and base derivation.
"""
import random

import pytest

from epid.core.radix import (
    CARDINALITY,
    components_base,
    compose,
    decompose,
)


class TestComponentsBase:
    """Test components_base function."""

    def test_cardinality(self):
        """The ordinal space is every IPv4 address."""
        assert CARDINALITY == 256 ** 4 == 4294967296

    def test_three_components(self):
        """Three components need base 1626."""
        assert components_base(3) == 1626

    def test_four_components(self):
        """Four components are plain octets (exact 4th root)."""
        assert components_base(4) == 256

    def test_exact_powers(self):
        """Perfect powers should not be rounded up past the exact root."""
        assert components_base(2) == 65536
        assert components_base(8) == 16
        assert components_base(16) == 4
        assert components_base(32) == 2

    def test_one_component(self):
        assert components_base(1) == CARDINALITY

    @pytest.mark.parametrize("length", range(1, 33))
    def test_base_covers_cardinality(self, length):
        """B^k must reach the cardinality and (B-1)^k must not."""
        base = components_base(length)
        assert base ** length >= CARDINALITY
        assert (base - 1) ** length < CARDINALITY

    def test_custom_cardinality(self):
        assert components_base(3, 1000) == 10
        assert components_base(3, 1001) == 11
        assert components_base(2, 10 ** 30) == 10 ** 15

    def test_zero_length_raises(self):
        with pytest.raises(ValueError, match="must be >= 1"):
            components_base(0)


class TestCompose:
    """Test compose function."""

    def test_four_components(self):
        """Octets compose most-significant first."""
        assert compose([192, 168, 0, 1], 256) == 192 * 256 ** 3 + 168 * 256 ** 2 + 1

    def test_four_components_default_base(self):
        """Base defaults to components_base(len)."""
        assert compose([192, 168, 0, 1]) == 192 * 256 ** 3 + 168 * 256 ** 2 + 1

    def test_three_components(self):
        assert compose([552, 131, 9]) == 552 * 1626 ** 2 + 131 * 1626 + 9

    def test_zero(self):
        assert compose([0, 0, 0, 0]) == 0

    def test_max_octets(self):
        assert compose([255, 255, 255, 255]) == CARDINALITY - 1

    def test_digit_too_large_raises(self):
        with pytest.raises(ValueError, match="must be 0-255"):
            compose([256, 0, 0, 0], 256)

    def test_negative_digit_raises(self):
        with pytest.raises(ValueError, match="must be 0-1625"):
            compose([-1, 0, 0])


class TestDecompose:
    """Test decompose function."""

    def test_low_number(self):
        """Small ordinals leave the high digits zero."""
        assert decompose(40, 4) == [0, 0, 0, 40]

    def test_high_number(self):
        ordinal = 192 * 256 ** 3 + 168 * 256 ** 2 + 1
        assert decompose(ordinal, 4) == [192, 168, 0, 1]

    def test_three_components(self):
        ordinal = 525 * 1626 ** 2 + 231 * 1626 + 23
        assert decompose(ordinal, 3) == [525, 231, 23]

    def test_zero(self):
        assert decompose(0, 3) == [0, 0, 0]

    def test_exact_length(self):
        for length in range(1, 13):
            assert len(decompose(12345, length)) == length

    def test_max_ordinal(self):
        assert decompose(CARDINALITY - 1, 4) == [255, 255, 255, 255]
        assert decompose(CARDINALITY - 1, 3) == [1624, 807, 489]

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Ordinal must be"):
            decompose(CARDINALITY, 4)
        with pytest.raises(ValueError, match="Ordinal must be"):
            decompose(-1, 3)

    def test_three_components_hold_more_than_cardinality(self):
        """1626^3 exceeds 256^4, so the top of the word space is still decodable."""
        assert decompose(1626 ** 3 - 1, 3) == [1625, 1625, 1625]


class TestInverse:
    """compose(decompose(o, k)) == o for every supported component count."""

    @pytest.mark.parametrize("length", range(3, 13))
    def test_random_ordinals(self, length):
        rng = random.Random(length)
        base = components_base(length)
        for _ in range(200):
            ordinal = rng.randrange(CARDINALITY)
            assert compose(decompose(ordinal, length), base) == ordinal

    @pytest.mark.parametrize("ordinal", [0, 1, 255, 256, 1625, 1626, CARDINALITY - 1])
    def test_boundaries(self, ordinal):
        for length in range(3, 13):
            assert compose(decompose(ordinal, length)) == ordinal
