"""Dashboard helpers: input checks, score wording and the last-result cache."""
import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

MIN_RESUME_CHARS = 100
MIN_JOB_CHARS = 50


def validate_text_inputs(resume_text: str, job_description: str) -> Optional[str]:
    """Return an error message for the text form, or None if it can be submitted."""
    resume_text, job_description = (resume_text or "").strip(), (job_description or "").strip()
    if not resume_text or not job_description:
        return "Please provide both resume text and job description"
    if len(resume_text) < MIN_RESUME_CHARS:
        return f"Resume text seems too short. Please provide more content (at least {MIN_RESUME_CHARS} characters)."
    if len(job_description) < MIN_JOB_CHARS:
        return "Job description seems too short. Please provide more details."
    return None


def validate_file_inputs(file_name: Optional[str], job_description: str) -> Optional[str]:
    job_description = (job_description or "").strip()
    if not file_name or not job_description:
        return "Please select a resume file and provide job description"
    if len(job_description) < MIN_JOB_CHARS:
        return "Job description seems too short. Please provide more details."
    return None


def score_band(score: int) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    return "poor"


def score_feedback(score: int) -> str:
    return {
        "excellent": "Excellent match! Your resume strongly aligns with the job requirements.",
        "good": "Good match! Your resume has solid alignment with some areas for improvement.",
        "poor": "Needs improvement. Your resume requires significant adjustments "
                "to better match the job requirements.",
    }[score_band(score)]


def save_last_result(analysis: dict, path: str) -> None:
    """Overwrite the cached analysis with *analysis* (JSON)."""
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(analysis, f, indent=2, ensure_ascii=False)


def load_last_result(path: str) -> Optional[dict]:
    """Cached analysis, or None when nothing usable has been saved."""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable result cache {path}: {e}")
        return None
    if not isinstance(data, dict) or "fitScore" not in data:
        logger.warning(f"Ignoring result cache {path}: unexpected content")
        return None
    return data
