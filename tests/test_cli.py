"""Tests for the score_resume command line script."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "score_resume.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("score_resume", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def inputs(tmp_path, monkeypatch, resume_data, ideal_data, master_data):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TAILOR_CONFIG", raising=False)

    paths = {}
    for name, data in [("resume", resume_data), ("ideal", ideal_data), ("master", master_data)]:
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        paths[name] = str(path)
    return paths


def test_json_output(cli, inputs, capsys):
    code = cli.main(["--resume", inputs["resume"], "--ideal", inputs["ideal"], "--json"])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["composite"] == 69
    assert data["max_achievable"] is None


def test_master_profile_adds_max_achievable(cli, inputs, capsys):
    code = cli.main([
        "--resume", inputs["resume"],
        "--ideal", inputs["ideal"],
        "--master", inputs["master"],
        "--json",
    ])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["max_achievable"] == 90


def test_formatted_report(cli, inputs, capsys):
    code = cli.main(["--resume", inputs["resume"], "--ideal", inputs["ideal"]])

    out = capsys.readouterr().out
    assert code == 0
    assert "ATS MATCH SCORE" in out
    assert "69/100" in out
    assert "kubernetes" in out
    assert "MEASURABLE RESULTS" not in out


def test_bullet_assessments_enabled_by_config(cli, inputs, tmp_path, capsys):
    config = tmp_path / "tailor.yaml"
    config.write_text("tailor:\n  show_bullet_assessments: true\n")

    code = cli.main([
        "--resume", inputs["resume"], "--ideal", inputs["ideal"], "--config", str(config)
    ])

    assert code == 0
    assert "MEASURABLE RESULTS (2/4 target)" in capsys.readouterr().out


def test_output_file(cli, inputs, tmp_path):
    output = tmp_path / "reports" / "score.json"

    code = cli.main([
        "--resume", inputs["resume"], "--ideal", inputs["ideal"], "--output", str(output)
    ])

    assert code == 0
    report = json.loads(output.read_text(encoding="utf-8"))
    assert report["keyword_score"] == 73
    assert report["detailed_scores"]["structure"]["score"] == 100


def test_missing_resume_file(cli, inputs, tmp_path):
    code = cli.main(["--resume", str(tmp_path / "missing.json"), "--ideal", inputs["ideal"]])
    assert code == 1


def test_invalid_ideal_profile(cli, inputs, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"keyword_map": {"hard_skills": []}}), encoding="utf-8")

    assert cli.main(["--resume", inputs["resume"], "--ideal", str(bad)]) == 1


def test_missing_config_file(cli, inputs, tmp_path):
    code = cli.main([
        "--resume", inputs["resume"],
        "--ideal", inputs["ideal"],
        "--config", str(tmp_path / "nope.yaml"),
    ])
    assert code == 1


def test_required_arguments(cli):
    with pytest.raises(SystemExit):
        cli.main(["--resume", "resume.json"])


def test_wrong_type_in_ideal_profile(cli, inputs, tmp_path, ideal_data):
    ideal_data["ideal_structure"]["total_page_count"] = "two"
    bad = tmp_path / "bad_type.json"
    bad.write_text(json.dumps(ideal_data), encoding="utf-8")

    assert cli.main(["--resume", inputs["resume"], "--ideal", str(bad)]) == 1
