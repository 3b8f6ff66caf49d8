"""
Lookup tables for compatibility sub-scores.

Geography and company-size compatibility are fully-specified symmetric
matrices built from their upper triangle, so ``m[x][y] == m[y][x]`` holds
by construction. Industry complementarity is a directed table: sports lists
retail as complementary, but the lookup is always keyed by the first brand.
"""

from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .schema import CompanySize, GeographicFocus


def symmetric_matrix(levels: Sequence[str], pairs: Dict[Tuple[str, str], float]) -> np.ndarray:
    """
    Build a symmetric matrix with a unit diagonal from off-diagonal pairs.

    Args:
        levels: Ordered axis labels
        pairs: Mapping of (level_a, level_b) to compatibility, one entry per unordered pair

    Returns:
        (n, n) float array

    Raises:
        ValueError: If a pair is missing, duplicated, or names an unknown level
    """
    index = {level: i for i, level in enumerate(levels)}
    n = len(levels)
    matrix = np.full((n, n), np.nan)
    np.fill_diagonal(matrix, 1.0)

    for (a, b), value in pairs.items():
        if a not in index or b not in index:
            raise ValueError(f"Unknown level in pair ({a}, {b})")
        i, j = index[a], index[b]
        if not np.isnan(matrix[i, j]):
            raise ValueError(f"Duplicate entry for pair ({a}, {b})")
        matrix[i, j] = value
        matrix[j, i] = value

    if np.isnan(matrix).any():
        missing = [
            (levels[i], levels[j])
            for i in range(n) for j in range(i + 1, n)
            if np.isnan(matrix[i, j])
        ]
        raise ValueError(f"Compatibility matrix is missing pairs: {missing}")

    return matrix


def matrix_lookup(levels: Sequence[str], matrix: np.ndarray, a: str, b: str) -> Optional[float]:
    """Return matrix[a][b], or None if either label is not on the axis."""
    try:
        i = levels.index(a)
        j = levels.index(b)
    except ValueError:
        return None
    return float(matrix[i, j])


GEOGRAPHY_LEVELS: Tuple[str, ...] = tuple(g.value for g in GeographicFocus)

GEOGRAPHY_MATRIX = symmetric_matrix(GEOGRAPHY_LEVELS, {
    ("local", "regional"): 0.8,
    ("local", "national"): 0.4,
    ("local", "international"): 0.2,
    ("local", "global"): 0.1,
    ("regional", "national"): 0.7,
    ("regional", "international"): 0.3,
    ("regional", "global"): 0.2,
    ("national", "international"): 0.7,
    ("national", "global"): 0.5,
    ("international", "global"): 0.8,
})

SIZE_LEVELS: Tuple[str, ...] = tuple(s.value for s in CompanySize)

SIZE_MATRIX = symmetric_matrix(SIZE_LEVELS, {
    ("startup", "small"): 0.9,
    ("startup", "medium"): 0.6,
    ("startup", "large"): 0.4,
    ("startup", "enterprise"): 0.2,
    ("small", "medium"): 0.8,
    ("small", "large"): 0.5,
    ("small", "enterprise"): 0.3,
    ("medium", "large"): 0.8,
    ("medium", "enterprise"): 0.6,
    ("large", "enterprise"): 0.9,
})

COMPLEMENTARY_INDUSTRIES: Dict[str, Tuple[str, ...]] = {
    "sports": ("entertainment", "healthcare", "retail"),
    "entertainment": ("sports", "technology", "retail"),
    "technology": ("entertainment", "financial", "healthcare"),
    "retail": ("sports", "entertainment", "food"),
    "financial": ("technology", "education"),
    "healthcare": ("sports", "technology", "education"),
    "education": ("technology", "healthcare", "financial"),
    "food": ("retail", "healthcare"),
    "automotive": ("technology", "retail"),
}


def geography_compatibility(a: str, b: str) -> Optional[float]:
    return matrix_lookup(GEOGRAPHY_LEVELS, GEOGRAPHY_MATRIX, a, b)


def size_compatibility(a: str, b: str) -> Optional[float]:
    return matrix_lookup(SIZE_LEVELS, SIZE_MATRIX, a, b)


def is_complementary_industry(a: str, b: str) -> bool:
    """True if ``b`` is listed as complementary to ``a`` (directed)."""
    return b in COMPLEMENTARY_INDUSTRIES.get(a, ())
