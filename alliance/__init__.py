"""
Strategic Alliance Builder

This package implements brand-partnership matchmaking, partnership ROI
scoring and lightweight collaboration tracking.

Key Design Decisions:
- Scoring components are pure functions over plain records (no shared state)
- Lookup tables are fully-specified symmetric matrices
- Missing inputs yield None/zero results and a logged diagnostic, never an exception
- The root document lives in an explicit store object saved after each mutation
"""

__version__ = "1.0.0"
