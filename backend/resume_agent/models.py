"""Pydantic models for the resume-agent engine and API."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for wire-facing models: snake_case in Python, camelCase in JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Knowledge base records
# ---------------------------------------------------------------------------


class ExperienceLevel(str, Enum):
    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"


class SkillCategory(FrozenModel):
    """A named skill area: keywords detect it in a posting, skills fill a resume."""
    name: str
    keywords: tuple[str, ...]
    skills: tuple[str, ...]


class SeniorityPattern(FrozenModel):
    level: ExperienceLevel
    years_range: str
    keywords: tuple[str, ...]


class EducationTemplate(FrozenModel):
    school: str
    degree: str
    fields: tuple[str, ...]
    descriptions: tuple[str, ...]


class TitlePattern(FrozenModel):
    """Regex capturing the words after a rank keyword, plus the prefix to re-attach."""
    pattern: str
    prefix: str


# ---------------------------------------------------------------------------
# Analyzer output
# ---------------------------------------------------------------------------


class JobAnalysis(BaseModel):
    """Structured view of a job posting, produced once per request."""
    detected_title: str
    domain: str
    experience_level: ExperienceLevel
    years_range: str
    matched_categories: list[SkillCategory] = Field(default_factory=list)
    extracted_keywords: list[str] = Field(default_factory=list)
    detected_technologies: list[str] = Field(default_factory=list)
    industry: str


class JobAnalysisSummary(CamelModel):
    """Display-friendly analysis returned alongside a generated resume."""
    detected_title: str
    domain: str
    experience_level: ExperienceLevel
    years_range: str
    matched_categories: list[str]
    extracted_keywords: list[str]
    detected_technologies: list[str]
    industry: str

    @classmethod
    def from_analysis(cls, analysis: JobAnalysis) -> "JobAnalysisSummary":
        return cls(
            detected_title=analysis.detected_title,
            domain=analysis.domain,
            experience_level=analysis.experience_level,
            years_range=analysis.years_range,
            matched_categories=[c.name for c in analysis.matched_categories],
            extracted_keywords=analysis.extracted_keywords,
            detected_technologies=analysis.detected_technologies,
            industry=analysis.industry,
        )


# ---------------------------------------------------------------------------
# Candidate profile (input; every field optional)
# ---------------------------------------------------------------------------


class ProfileSkill(CamelModel):
    name: str | None = None
    category: str | None = None
    level: str | None = None
    years_of_experience: float | None = None


class ProfileExperience(CamelModel):
    company: str | None = None
    position: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    description: str | None = None
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)


class ProfileEducation(CamelModel):
    institution: str | None = None
    degree: str | None = None
    field: str | None = Field(
        default=None,
        validation_alias=AliasChoices("field", "fieldOfStudy", "field_of_study"),
    )
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    gpa: float | None = None
    achievements: list[str] = Field(default_factory=list)

    @field_validator("gpa", mode="before")
    @classmethod
    def _blank_gpa_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ProfileCertification(CamelModel):
    """Accepted for wire compatibility with the profile service; not used in generation."""
    name: str | None = None
    issuer: str | None = None
    issue_date: str | None = None
    expiry_date: str | None = None
    credential_id: str | None = None
    credential_url: str | None = None


class ProfileProject(CamelModel):
    """Accepted for wire compatibility with the profile service; not used in generation."""
    name: str | None = None
    description: str | None = None
    role: str | None = None
    technologies: list[str] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    github_url: str | None = None
    demo_url: str | None = None


class CandidateProfile(CamelModel):
    """Flat candidate profile. None (or an empty string) means "not provided"."""
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None
    website: str | None = None
    summary: str | None = None
    # Fractional values are legal in stored profiles (e.g. 2.5).
    years_of_experience: float | None = Field(default=None, ge=0)
    specialization: str | None = None
    skills: list[ProfileSkill] = Field(default_factory=list)
    experiences: list[ProfileExperience] = Field(default_factory=list)
    education: list[ProfileEducation] = Field(default_factory=list)
    certifications: list[ProfileCertification] = Field(default_factory=list)
    projects: list[ProfileProject] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Generated resume (output)
# ---------------------------------------------------------------------------


class ResumeExperience(CamelModel):
    company: str
    position: str
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str


class ResumeEducation(CamelModel):
    school: str
    degree: str
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


class ResumeTemplateData(CamelModel):
    """Fully populated resume document, ready for template rendering."""
    full_name: str
    email: str
    phone: str
    location: str
    linkedin: str
    github: str
    website: str = ""
    summary: str
    experiences: list[ResumeExperience] = Field(default_factory=list)
    education: list[ResumeEducation] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API envelopes
# ---------------------------------------------------------------------------


class GenerateRequest(CamelModel):
    """Input from the profile service or UI."""
    job_description: str = Field(..., description="Full job posting text")
    user_profile: CandidateProfile | None = Field(
        default=None, description="Optional flattened candidate profile"
    )


class GenerateResponse(CamelModel):
    success: bool = True
    data: ResumeTemplateData
    analysis: JobAnalysisSummary
    message: str = "Resume generated successfully"
    processing_time_ms: int
