"""End-to-end test of the analysis runner on the built-in samples."""

import json

import pandas as pd

from alliance.run import run_analysis


def test_run_analysis_writes_reports(config_path, tmp_path):
    result = run_analysis(str(config_path), output_dir=str(tmp_path))

    assert result["success"] is True

    report = json.loads((tmp_path / "alliance_report.json").read_text())
    scores = [p["compatibilityScore"] for p in report["ranked_partners"]]
    assert len(scores) == 5
    assert scores == sorted(scores, reverse=True)
    assert report["partnership_assessment"]["overallScore"] == result["partnership_assessment"]["overallScore"]

    ranking = pd.read_csv(tmp_path / "partner_ranking.csv")
    assert len(ranking) == 6

    evaluation = json.loads((tmp_path / "evaluation_report.json").read_text())
    assert evaluation["distribution_stats"]["count"] == 6


def test_run_analysis_with_input_files(config_path, tmp_path):
    partners = tmp_path / "partners.csv"
    partners.write_text(
        "brandName,industry,companySize,geographicFocus,values,objectives\n"
        "TechInnovate,technology,large,global,innovation;quality,product;innovation\n"
        "SportsFit,sports,medium,national,community,audience\n"
    )

    result = run_analysis(str(config_path), partners_path=str(partners), output_dir=str(tmp_path / "out"))

    assert {p["brandName"] for p in result["ranked_partners"]} == {"TechInnovate", "SportsFit"}
    assert (tmp_path / "out" / "partner_ranking.csv").exists()
