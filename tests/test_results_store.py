import json

from ui.results_store import (
    load_last_result,
    save_last_result,
    score_band,
    score_feedback,
    validate_file_inputs,
    validate_text_inputs,
)

LONG_RESUME = "Backend developer. " * 10
LONG_JOB = "We need a backend developer with Python experience and APIs."


def test_validate_text_inputs():
    assert validate_text_inputs("", LONG_JOB) == "Please provide both resume text and job description"
    assert validate_text_inputs(LONG_RESUME, "   ") == "Please provide both resume text and job description"
    assert "too short" in validate_text_inputs("Short resume", LONG_JOB)
    assert validate_text_inputs(LONG_RESUME, "Python dev") == \
        "Job description seems too short. Please provide more details."
    assert validate_text_inputs(LONG_RESUME, LONG_JOB) is None


def test_validate_file_inputs():
    assert validate_file_inputs(None, LONG_JOB) == "Please select a resume file and provide job description"
    assert validate_file_inputs("cv.pdf", "short") == "Job description seems too short. Please provide more details."
    assert validate_file_inputs("cv.pdf", LONG_JOB) is None


def test_score_bands():
    assert score_band(100) == score_band(80) == "excellent"
    assert score_band(79) == score_band(60) == "good"
    assert score_band(59) == score_band(0) == "poor"
    assert score_feedback(85).startswith("Excellent match!")
    assert score_feedback(65).startswith("Good match!")
    assert score_feedback(10).startswith("Needs improvement.")


def test_save_and_load_last_result(tmp_path):
    path = str(tmp_path / "cache" / "last.json")
    analysis = {"fitScore": 82, "suggestions": ["Add these important keywords: looking"]}
    save_last_result(analysis, path)
    assert load_last_result(path) == analysis

    save_last_result({"fitScore": 15}, path)
    assert load_last_result(path) == {"fitScore": 15}


def test_load_last_result_missing_or_corrupt(tmp_path):
    assert load_last_result(str(tmp_path / "absent.json")) is None

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")
    assert load_last_result(str(corrupt)) is None

    wrong_shape = tmp_path / "list.json"
    wrong_shape.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert load_last_result(str(wrong_shape)) is None
