"""Evaluation module for scoring-rule analysis."""

from .metrics import (
    compute_score_distribution_stats,
    check_matrix_symmetry,
    sanity_check_risk_monotonicity,
    EvaluationReport,
    create_evaluation_report
)

__all__ = [
    "compute_score_distribution_stats",
    "check_matrix_symmetry",
    "sanity_check_risk_monotonicity",
    "EvaluationReport",
    "create_evaluation_report"
]
