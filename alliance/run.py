"""
Command-line runner for the alliance builder.

Usage:
    python -m alliance.run --config configs/config.yaml \
        [--profile profile.json] [--partners partners.csv] [--case case.yaml] \
        [--output-dir reports]

The runner performs the following steps:
1. Load configuration and inputs (built-in samples for anything not given)
2. Rank the partner pool by compatibility with the brand
3. Build a compatibility report for the best match
4. Assess the partnership case (financial ROI, strategic value, risk)
5. Recommend library resources for the brand
6. Evaluate the scoring rules and write all results as JSON
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional
from datetime import datetime
import json

import numpy as np

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_analysis(
    config_path: str,
    profile_path: Optional[str] = None,
    partners_path: Optional[str] = None,
    case_path: Optional[str] = None,
    output_dir: Optional[str] = None
) -> Dict[str, Any]:
    """
    Run partner matching and partnership assessment for one brand.

    Args:
        config_path: Path to the configuration YAML file
        profile_path: Brand profile (JSON/YAML); sample profile if omitted
        partners_path: Partner pool (JSON/CSV); sample partners if omitted
        case_path: Partnership case (JSON/YAML); sample case if omitted
        output_dir: If provided, write reports here instead of the config default

    Returns:
        Dictionary with the analysis results and paths to written reports
    """
    from .configs import load_config, validate_config
    from .data_loading import (
        load_brand_profile,
        load_partner_pool,
        load_partnership_case,
        generate_sample_partners,
        sample_brand_profile,
        sample_partnership_case,
    )
    from .matching import create_scorer_from_config, partners_to_frame
    from .roi import create_engine_from_config
    from .library import create_ranker_from_config
    from .evaluation import create_evaluation_report

    # =========================================================================
    # 1. Load and validate configuration and inputs
    # =========================================================================
    logger.info("=" * 60)
    logger.info("STRATEGIC ALLIANCE BUILDER")
    logger.info("=" * 60)

    config = load_config(config_path)
    issues = validate_config(config)
    if issues:
        for issue in issues:
            logger.warning(f"Config issue: {issue}")

    setup_logging(config.get("global", {}).get("log_level", "INFO"))

    brand = load_brand_profile(profile_path) if profile_path else sample_brand_profile()
    partners = load_partner_pool(partners_path) if partners_path else generate_sample_partners()
    case = load_partnership_case(case_path) if case_path else sample_partnership_case()
    brand_name = brand.brand_name or "Your brand"
    logger.info(f"Brand: {brand_name} ({brand.industry}, {brand.company_size}, {brand.geographic_focus})")
    logger.info(f"Partner pool: {len(partners)} candidates")

    # =========================================================================
    # 2. Rank partners
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 1: Ranking Partners")
    logger.info("=" * 60)

    scorer = create_scorer_from_config(config)
    all_ranked = scorer.find_most_promising_partners(brand, partners, limit=len(partners))
    top_partners = all_ranked[:scorer.config.default_limit]
    for p in top_partners:
        logger.info(f"  {p.compatibility_score:3d}  {p.profile.brand_name or p.profile.id}")

    # =========================================================================
    # 3. Compatibility report for the best match
    # =========================================================================
    best_report = None
    if top_partners:
        best = top_partners[0]
        best_report = scorer.generate_report(brand, best.profile)
        logger.info(f"Best match: {best.profile.brand_name} ({best_report.overall_score})")

    # =========================================================================
    # 4. Partnership assessment
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 2: Assessing Partnership Case")
    logger.info("=" * 60)

    engine = create_engine_from_config(config)
    assessment = engine.calculate_partnership_roi(case)
    if assessment is not None:
        logger.info(f"Overall score: {assessment.overall_score} ({assessment.recommendation})")
        if assessment.financial_roi is not None:
            logger.info(f"ROI: {assessment.financial_roi.roi_percentage}%")
        logger.info(f"Risk: {assessment.risk_assessment.overall_risk} ({assessment.risk_assessment.risk_level})")

    # =========================================================================
    # 5. Resource recommendations
    # =========================================================================
    ranker = create_ranker_from_config(config)
    recommended = ranker.recommended(brand)

    # =========================================================================
    # 6. Evaluation and outputs
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 3: Evaluating Scoring Rules")
    logger.info("=" * 60)

    scores = np.array([p.compatibility_score for p in all_ranked], dtype=float)
    evaluation = create_evaluation_report(
        brand_name,
        scores,
        risk_base_factors=case.risk_factors
    )
    logger.info("\n" + evaluation.summary())

    effective_output_dir = Path(output_dir or config.get("global", {}).get("output_dir", "reports"))
    effective_output_dir.mkdir(parents=True, exist_ok=True)

    results = {
        "generated_at": datetime.now().isoformat(),
        "brand": brand.to_dict(),
        "ranked_partners": [p.to_dict() for p in top_partners],
        "best_match_report": best_report.to_dict() if best_report else None,
        "partnership_assessment": assessment.to_dict() if assessment else None,
        "recommended_resources": [r.to_dict() for r in recommended],
        "evaluation": evaluation.to_dict(),
    }

    report_path = effective_output_dir / "alliance_report.json"
    with open(report_path, "w") as f:
        json.dump(results, f, indent=2)
    logger.info(f"Saved report to {report_path}")

    ranking_path = effective_output_dir / "partner_ranking.csv"
    partners_to_frame(all_ranked).to_csv(ranking_path, index=False)
    logger.info(f"Saved partner ranking to {ranking_path}")

    evaluation_path = effective_output_dir / "evaluation_report.json"
    evaluation.save(str(evaluation_path))

    results["success"] = True
    results["paths"] = {
        "report": str(report_path),
        "ranking": str(ranking_path),
        "evaluation": str(evaluation_path),
    }
    return results


def main():
    """Main entry point for the analysis runner."""
    parser = argparse.ArgumentParser(
        description="Rank partners and assess a partnership for one brand"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Brand profile file (JSON/YAML)"
    )
    parser.add_argument(
        "--partners",
        type=str,
        default=None,
        help="Partner pool file (JSON/CSV)"
    )
    parser.add_argument(
        "--case",
        type=str,
        default=None,
        help="Partnership case file (JSON/YAML)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory for reports (overrides config)"
    )

    args = parser.parse_args()

    try:
        result = run_analysis(
            args.config,
            profile_path=args.profile,
            partners_path=args.partners,
            case_path=args.case,
            output_dir=args.output_dir
        )
        if result["success"]:
            logger.info("\nAnalysis completed successfully!")
            return 0
        else:
            logger.error("\nAnalysis failed!")
            return 1
    except Exception as e:
        logger.exception(f"Analysis failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
