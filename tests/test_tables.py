"""Tests for the compatibility lookup tables."""

import numpy as np
import pytest

from alliance.matching.tables import (
    GEOGRAPHY_LEVELS,
    GEOGRAPHY_MATRIX,
    SIZE_LEVELS,
    SIZE_MATRIX,
    COMPLEMENTARY_INDUSTRIES,
    symmetric_matrix,
    geography_compatibility,
    size_compatibility,
    is_complementary_industry,
)
from alliance.matching.schema import Industry


class TestMatrices:
    @pytest.mark.parametrize("matrix", [GEOGRAPHY_MATRIX, SIZE_MATRIX])
    def test_symmetric_with_unit_diagonal(self, matrix):
        assert np.array_equal(matrix, matrix.T)
        assert np.all(np.diag(matrix) == 1.0)
        assert np.all((matrix >= 0) & (matrix <= 1))

    def test_every_pair_is_symmetric(self):
        for a in GEOGRAPHY_LEVELS:
            for b in GEOGRAPHY_LEVELS:
                assert geography_compatibility(a, b) == geography_compatibility(b, a)
        for a in SIZE_LEVELS:
            for b in SIZE_LEVELS:
                assert size_compatibility(a, b) == size_compatibility(b, a)

    def test_known_values(self):
        assert geography_compatibility("local", "regional") == 0.8
        assert geography_compatibility("global", "local") == 0.1
        assert size_compatibility("enterprise", "medium") == 0.6
        assert size_compatibility("startup", "small") == 0.9

    def test_unknown_level(self):
        assert geography_compatibility("galactic", "local") is None
        assert size_compatibility("huge", "small") is None


class TestSymmetricMatrix:
    def test_missing_pair_raises(self):
        with pytest.raises(ValueError, match="missing pairs"):
            symmetric_matrix(["a", "b", "c"], {("a", "b"): 0.5, ("a", "c"): 0.5})

    def test_duplicate_pair_raises(self):
        with pytest.raises(ValueError, match="Duplicate"):
            symmetric_matrix(["a", "b"], {("a", "b"): 0.5, ("b", "a"): 0.4})

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown level"):
            symmetric_matrix(["a", "b"], {("a", "z"): 0.5})


class TestComplementaryIndustries:
    def test_keys_and_entries_are_known_industries(self):
        known = {i.value for i in Industry}
        for industry, partners in COMPLEMENTARY_INDUSTRIES.items():
            assert industry in known
            assert set(partners) <= known

    def test_lookup_is_directed(self):
        assert is_complementary_industry("automotive", "technology")
        assert not is_complementary_industry("technology", "automotive")

    def test_other_has_no_complements(self):
        assert not is_complementary_industry("other", "technology")
