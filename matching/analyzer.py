import logging

from parsers.text_extract import extract_experience_years, extract_keywords, extract_skills
from schemas import AnalysisResult, ExperienceAnalysis, KeywordAnalysis, SkillsAnalysis
from .advice import build_improvements, build_strengths, build_suggestions
from .scorer import overlap, require_text, round_half_up, score_components

logger = logging.getLogger(__name__)

# Caps on the lists returned to the client; rates use the full lists
MAX_MATCHED_KEYWORDS = 10
MAX_MISSING_KEYWORDS = 8
MAX_LISTED_SKILLS = 12


def _rate(matched: list, required: list) -> int:
    return round_half_up(len(matched) / max(len(required), 1) * 100)


def analyze_resume(resume_text: str, job_description: str) -> AnalysisResult:
    """
    Compare a resume against a job description.

    Args:
        resume_text: Plain resume text
        job_description: Plain job description text

    Returns:
        AnalysisResult with the fit score, keyword/skill/experience
        breakdowns and feedback lists. Empty strings give a low but
        valid result; only non-string input raises TypeError.
    """
    require_text("resume_text", resume_text)
    require_text("job_description", job_description)
    logger.info(f"Analyzing resume ({len(resume_text)} chars) against job description ({len(job_description)} chars)")

    resume_keywords = extract_keywords(resume_text)
    job_keywords = extract_keywords(job_description)
    resume_skills = extract_skills(resume_text)
    job_skills = extract_skills(job_description)
    resume_exp = extract_experience_years(resume_text)
    job_exp = extract_experience_years(job_description)

    matched_keywords = overlap(job_keywords, resume_keywords)
    missing_keywords = [kw for kw in job_keywords if kw not in matched_keywords]
    matched_skills = overlap(job_skills, resume_skills)
    missing_skills = [s for s in job_skills if s not in matched_skills]

    components = score_components(
        resume_keywords, job_keywords, resume_skills, job_skills, resume_exp, job_exp
    )

    return AnalysisResult(
        fit_score=round_half_up(components["final"]),
        keyword_analysis=KeywordAnalysis(
            matched=matched_keywords[:MAX_MATCHED_KEYWORDS],
            missing=missing_keywords[:MAX_MISSING_KEYWORDS],
            total_matches=len(matched_keywords),
            total_required=len(job_keywords),
            match_rate=_rate(matched_keywords, job_keywords),
        ),
        skills_analysis=SkillsAnalysis(
            matched=matched_skills,
            missing=missing_skills,
            resume_skills=resume_skills[:MAX_LISTED_SKILLS],
            job_skills=job_skills[:MAX_LISTED_SKILLS],
            match_rate=_rate(matched_skills, job_skills),
        ),
        experience_analysis=ExperienceAnalysis(
            resume_experience=resume_exp,
            job_required_experience=job_exp,
            experience_gap=max(0, job_exp - resume_exp),
        ),
        suggestions=build_suggestions(missing_keywords, missing_skills, resume_exp, job_exp),
        strengths=build_strengths(resume_text, matched_keywords, matched_skills, resume_exp),
        improvements=build_improvements(missing_keywords, missing_skills),
    )
