"""Step 3: Final validation pass over an assembled resume.

Pure and idempotent: returns a new ResumeTemplateData, never mutates the
input, and validate_and_polish(validate_and_polish(x)) == validate_and_polish(x).
"""

from resume_agent.core.constants import PLACEHOLDER_NAME, PLACEHOLDER_SKILLS, PLACEHOLDER_SUMMARY
from resume_agent.core.logger import logger
from resume_agent.models import ResumeTemplateData


def dedupe_skills(skills: list[str]) -> list[str]:
    """Drop blanks and case-insensitive repeats, keeping the first spelling seen."""
    seen: set[str] = set()
    unique = []
    for skill in skills:
        key = skill.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(skill)
    return unique


def validate_and_polish(data: ResumeTemplateData) -> ResumeTemplateData:
    """Fill placeholders for empty required fields and de-duplicate skills."""
    full_name = data.full_name if data.full_name.strip() else PLACEHOLDER_NAME
    summary = data.summary if data.summary.strip() else PLACEHOLDER_SUMMARY
    skills = dedupe_skills(data.skills) or list(PLACEHOLDER_SKILLS)

    if len(skills) != len(data.skills):
        logger.debug(f"Skills normalized: {len(data.skills)} -> {len(skills)}", extra={"stage": "validate"})

    return data.model_copy(update={"full_name": full_name, "summary": summary, "skills": skills})
