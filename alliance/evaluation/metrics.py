"""
Evaluation metrics for the scoring rules.

There is no ground truth for partnership quality, so evaluation documents
how the rules behave rather than how well they predict:
1. Score distribution over a partner pool
2. Symmetry of the pairwise lookup matrices
3. Sanity checks (monotonicity: raising a risk input never lowers overall risk)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Mapping
import json
from pathlib import Path

import numpy as np
from scipy.stats import spearmanr

from ..matching.tables import GEOGRAPHY_MATRIX, SIZE_MATRIX
from ..roi.risk import calculate_risk_assessment
from ..roi.schema import RISK_FACTOR_NAMES

logger = logging.getLogger(__name__)

RATING_LEVELS = [0, 1, 2, 3, 4, 5]


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 42.0, "p50": 61.0, "p90": 80.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": int(self.count),
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class SymmetryCheck:
    """Result of a lookup-matrix symmetry check."""
    name: str
    is_symmetric: bool
    max_abs_difference: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "is_symmetric": bool(self.is_symmetric),
            "max_abs_difference": float(self.max_abs_difference)
        }


@dataclass
class MonotonicityCheck:
    """Results of the risk monotonicity sanity check."""
    n_factors: int
    mean_rank_correlation: float
    is_monotonic: bool
    n_violations: int
    violating_factors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_factors": int(self.n_factors),
            "mean_rank_correlation": float(self.mean_rank_correlation),
            "is_monotonic": bool(self.is_monotonic),
            "n_violations": int(self.n_violations),
            "violating_factors": list(self.violating_factors)
        }


@dataclass
class EvaluationReport:
    """
    Evaluation report for one brand against a partner pool.

    Contains the compatibility score distribution, matrix symmetry checks and
    the risk monotonicity sanity check.
    """
    name: str
    distribution_stats: ScoreDistributionStats
    symmetry_checks: List[SymmetryCheck] = field(default_factory=list)
    monotonicity_check: Optional[MonotonicityCheck] = None
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "name": self.name,
            "distribution_stats": self.distribution_stats.to_dict(),
            "symmetry_checks": [c.to_dict() for c in self.symmetry_checks],
            "additional_metrics": self.additional_metrics
        }
        if self.monotonicity_check:
            result["monotonicity_check"] = self.monotonicity_check.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved evaluation report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        stats = self.distribution_stats
        lines = [
            f"Evaluation Report: {self.name}",
            "=" * 50,
            "",
            f"Compatibility Scores ({stats.count} partners):",
            f"  Mean: {stats.mean:.2f}",
            f"  Std:  {stats.std:.2f}",
            f"  Min:  {stats.min:.0f}",
            f"  Max:  {stats.max:.0f}",
        ]

        for q_name, q_value in stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.2f}")

        if self.symmetry_checks:
            lines.extend(["", "Matrix Symmetry:"])
            for check in self.symmetry_checks:
                lines.append(f"  {check.name}: {'ok' if check.is_symmetric else 'ASYMMETRIC'}")

        if self.monotonicity_check:
            lines.extend([
                "",
                "Risk Monotonicity Check:",
                f"  Mean rank correlation: {self.monotonicity_check.mean_rank_correlation:.4f}",
                f"  Is monotonic: {self.monotonicity_check.is_monotonic}",
                f"  Violations: {self.monotonicity_check.n_violations}",
            ])

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: np.ndarray,
    quantiles: List[float] = [0.1, 0.25, 0.5, 0.75, 0.9]
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Array of scores
        quantiles: Quantiles to compute

    Returns:
        ScoreDistributionStats instance (all zeros for an empty array)
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        logger.warning("No scores to summarize")
        return ScoreDistributionStats(
            count=0, mean=0.0, std=0.0, min=0.0, max=0.0,
            quantiles={f"p{int(q * 100)}": 0.0 for q in quantiles}
        )

    quantile_values = {
        f"p{int(q * 100)}": float(np.quantile(scores, q))
        for q in quantiles
    }

    return ScoreDistributionStats(
        count=int(scores.size),
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_values
    )


def check_matrix_symmetry(name: str, matrix: np.ndarray, tolerance: float = 1e-9) -> SymmetryCheck:
    """Check that a square lookup matrix equals its transpose."""
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Matrix '{name}' must be square, got shape {matrix.shape}")

    difference = float(np.max(np.abs(matrix - matrix.T))) if matrix.size else 0.0
    is_symmetric = difference <= tolerance
    if not is_symmetric:
        logger.warning(f"Matrix '{name}' is not symmetric (max difference {difference})")
    return SymmetryCheck(name=name, is_symmetric=is_symmetric, max_abs_difference=difference)


def sanity_check_risk_monotonicity(
    base_factors: Optional[Mapping[str, Any]] = None,
    levels: List[int] = RATING_LEVELS,
    threshold: float = 0.5
) -> MonotonicityCheck:
    """
    Sweep each risk input over ``levels`` and check overall risk never drops.

    Each sweep holds the other inputs at ``base_factors`` (all zero by default).

    Args:
        base_factors: Baseline risk ratings
        levels: Input values to sweep, ascending
        threshold: Spearman correlation threshold for the "is_monotonic" flag

    Returns:
        MonotonicityCheck instance
    """
    base = {name: 0 for name in RISK_FACTOR_NAMES}
    base.update(base_factors or {})

    correlations = []
    violating = []
    n_violations = 0

    for name in RISK_FACTOR_NAMES:
        risks = []
        for level in levels:
            factors = dict(base)
            factors[name] = level
            risks.append(calculate_risk_assessment(factors).overall_risk)

        drops = int(np.sum(np.diff(risks) < 0))
        if drops:
            n_violations += drops
            violating.append(name)

        # Rank correlation is undefined when a sweep is flat (e.g. already clamped)
        if len(set(risks)) > 1:
            correlation, _ = spearmanr(levels, risks)
            correlations.append(float(correlation))

    mean_correlation = float(np.mean(correlations)) if correlations else 0.0
    if violating:
        logger.warning(f"Risk decreases when raising: {violating}")

    return MonotonicityCheck(
        n_factors=len(RISK_FACTOR_NAMES),
        mean_rank_correlation=mean_correlation,
        is_monotonic=n_violations == 0 and mean_correlation >= threshold,
        n_violations=n_violations,
        violating_factors=violating
    )


def create_evaluation_report(
    name: str,
    scores: np.ndarray,
    risk_base_factors: Optional[Mapping[str, Any]] = None,
    quantiles: List[float] = [0.1, 0.25, 0.5, 0.75, 0.9]
) -> EvaluationReport:
    """
    Create a complete evaluation report.

    Args:
        name: Report name (usually the brand being matched)
        scores: Compatibility scores against the partner pool
        risk_base_factors: Baseline for the risk monotonicity sweep
        quantiles: Quantiles to compute

    Returns:
        EvaluationReport instance
    """
    dist_stats = compute_score_distribution_stats(scores, quantiles)

    symmetry = [
        check_matrix_symmetry("geography", GEOGRAPHY_MATRIX),
        check_matrix_symmetry("company_size", SIZE_MATRIX),
    ]

    monotonicity = sanity_check_risk_monotonicity(risk_base_factors)

    return EvaluationReport(
        name=name,
        distribution_stats=dist_stats,
        symmetry_checks=symmetry,
        monotonicity_check=monotonicity
    )
