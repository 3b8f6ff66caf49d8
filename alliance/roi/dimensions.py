"""
Point-budget scoring shared by the strategic-value and risk dimensions.

Each dimension is a list of factor rules. A rule maps one named input onto
a share of the dimension's 100-point budget:

    contribution = weight * value

where ``value`` is the parsed input, optionally capped (``input_cap``) or
inverted (``invert_from - value``, so lower inputs score higher). The
dimension score is the rounded sum clamped to [0, 100].
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..common import parse_number, clamp_score


@dataclass(frozen=True)
class FactorRule:
    """
    One named input of a scoring dimension.

    Attributes:
        name: Factor key in the input mapping
        weight: Points per input unit
        input_cap: Upper bound applied to the input before weighting
        invert_from: If set, the input is replaced by ``invert_from - input``
        only_when_present: Score only when the key is present (needed for
            inverted factors, where an absent input must not earn points)
    """
    name: str
    weight: float
    input_cap: Optional[float] = None
    invert_from: Optional[float] = None
    only_when_present: bool = False

    def contribution(self, factors: Mapping[str, Any]) -> float:
        raw = factors.get(self.name)
        if self.only_when_present and raw is None:
            return 0.0

        value = parse_number(raw)
        if self.input_cap is not None:
            value = min(self.input_cap, value)
        if self.invert_from is not None:
            value = self.invert_from - value
        return self.weight * value


def score_dimension(factors: Mapping[str, Any], rules: List[FactorRule]) -> int:
    """Sum rule contributions and clamp to an integer in [0, 100]."""
    return clamp_score(sum(rule.contribution(factors) for rule in rules))


def score_dimensions(factors: Mapping[str, Any], dimensions: Dict[str, List[FactorRule]]) -> Dict[str, int]:
    """Score every dimension, preserving the dimension order."""
    return {name: score_dimension(factors, rules) for name, rules in dimensions.items()}
