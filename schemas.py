from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Keyword overlap between resume and job description
class KeywordAnalysis(CamelModel):
    matched: List[str] = []
    missing: List[str] = []
    total_matches: int = 0
    total_required: int = 0
    match_rate: int = 0


# Skill overlap against the skill catalog
class SkillsAnalysis(CamelModel):
    matched: List[str] = []
    missing: List[str] = []
    resume_skills: List[str] = []
    job_skills: List[str] = []
    match_rate: int = 0


class ExperienceAnalysis(CamelModel):
    resume_experience: int = 0
    job_required_experience: int = 0
    experience_gap: int = 0


# Full result of one resume / job description comparison
class AnalysisResult(CamelModel):
    fit_score: int = Field(ge=0, le=100)
    keyword_analysis: KeywordAnalysis
    skills_analysis: SkillsAnalysis
    experience_analysis: ExperienceAnalysis
    suggestions: List[str] = []
    strengths: List[str] = []
    improvements: List[str] = []


# Request body for /api/analyze/text; both fields are checked in the route
class TextAnalysisIn(CamelModel):
    resume_text: Optional[str] = None
    job_description: Optional[str] = None


class AnalysisOut(BaseModel):
    success: bool = True
    analysis: AnalysisResult
    message: Optional[str] = None


class HealthOut(BaseModel):
    success: bool = True
    status: str
    message: str
    timestamp: str
    version: str


class ErrorOut(BaseModel):
    success: bool = False
    error: str
