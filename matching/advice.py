"""Human-readable feedback lists built from a resume/job comparison."""
from typing import List

CLOSING_SUGGESTIONS = [
    'Use specific metrics like "increased performance by 40%"',
    "Tailor your resume to match the job requirements more closely",
]
CLOSING_IMPROVEMENTS = [
    "Add more quantifiable achievements with specific numbers",
    "Use industry-standard terminology throughout your resume",
]
FALLBACK_STRENGTH = "Good foundational qualifications for this role"
LEADERSHIP_MARKERS = ("lead", "manage")


def build_suggestions(missing_keywords: List[str], missing_skills: List[str],
                      resume_years: int, job_years: int) -> List[str]:
    suggestions = []
    if missing_keywords:
        suggestions.append(f"Add these important keywords: {', '.join(missing_keywords[:5])}")
    if missing_skills:
        suggestions.append(f"Consider learning: {', '.join(missing_skills[:3])}")
    if resume_years < job_years and job_years > 0:
        suggestions.append(
            f"Highlight your {resume_years} years of experience to match the required {job_years} years"
        )
    suggestions.extend(CLOSING_SUGGESTIONS)
    return suggestions


def build_strengths(resume_text: str, matched_keywords: List[str],
                    matched_skills: List[str], resume_years: int) -> List[str]:
    strengths = []
    if matched_skills:
        strengths.append(f"Strong skills in: {', '.join(matched_skills[:3])}")
    if resume_years >= 2:
        strengths.append(f"Relevant professional experience ({resume_years}+ years)")
    if len(matched_keywords) > 5:
        strengths.append("Good keyword alignment with job requirements")
    text_lower = resume_text.lower()
    if any(marker in text_lower for marker in LEADERSHIP_MARKERS):
        strengths.append("Leadership experience demonstrated")
    return strengths or [FALLBACK_STRENGTH]


def build_improvements(missing_keywords: List[str], missing_skills: List[str]) -> List[str]:
    improvements = []
    if len(missing_keywords) > 3:
        improvements.append("Increase keyword density for better ATS compatibility")
    if missing_skills:
        improvements.append(f"Develop skills in: {', '.join(missing_skills[:2])}")
    improvements.extend(CLOSING_IMPROVEMENTS)
    return improvements
