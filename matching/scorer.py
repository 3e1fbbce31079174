import logging
import math
from typing import Dict, List

from parsers.text_extract import extract_experience_years, extract_keywords, extract_skills

logger = logging.getLogger(__name__)

# Weights out of 100
W_KEYWORD, W_SKILL, W_EXPERIENCE = 40.0, 35.0, 25.0
# Awarded when the job description states no experience requirement
NO_REQUIREMENT_EXPERIENCE_SCORE = 15.0
MAX_SCORE = 100.0


def require_text(name: str, value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def round_half_up(value: float) -> int:
    """Round x.5 away from zero for non-negative values (round() would go to even)."""
    return int(math.floor(value + 0.5))


def overlap(required: List[str], offered: List[str]) -> List[str]:
    """Items of *required* also present in *offered*, in *required* order."""
    offered_set = set(offered)
    return [item for item in required if item in offered_set]


def coverage(required: List[str], offered: List[str]) -> float:
    return len(overlap(required, offered)) / max(len(required), 1)


def experience_score(resume_years: int, job_years: int) -> float:
    if job_years <= 0:
        return NO_REQUIREMENT_EXPERIENCE_SCORE
    if resume_years >= job_years:
        return W_EXPERIENCE
    return (resume_years / job_years) * W_EXPERIENCE


def score_components(resume_keywords, job_keywords, resume_skills, job_skills,
                     resume_years, job_years) -> Dict[str, float]:
    """Weighted sub-scores from already extracted features."""
    keyword = coverage(job_keywords, resume_keywords) * W_KEYWORD
    skill = coverage(job_skills, resume_skills) * W_SKILL
    experience = experience_score(resume_years, job_years)
    final = min(MAX_SCORE, keyword + skill + experience)

    logger.info(
        f"Score breakdown: keywords {len(overlap(job_keywords, resume_keywords))}/{len(job_keywords)} "
        f"({round_half_up(keyword)}), skills {len(overlap(job_skills, resume_skills))}/{len(job_skills)} "
        f"({round_half_up(skill)}), experience {resume_years}y vs {job_years}y "
        f"({round_half_up(experience)}), total {round_half_up(final)}"
    )
    return {
        "keyword": keyword,
        "skill": skill,
        "experience": experience,
        "final": final,
    }


def composite_score(resume_text: str, job_description: str) -> Dict[str, float]:
    require_text("resume_text", resume_text)
    require_text("job_description", job_description)
    return score_components(
        extract_keywords(resume_text),
        extract_keywords(job_description),
        extract_skills(resume_text),
        extract_skills(job_description),
        extract_experience_years(resume_text),
        extract_experience_years(job_description),
    )


def calculate_fit_score(resume_text: str, job_description: str) -> float:
    """Fit score in [0, 100] before rounding."""
    return composite_score(resume_text, job_description)["final"]
