"""Step 2: Assemble resume content from a JobAnalysis and an optional profile.

Real profile data always wins. Any section the profile leaves empty is
synthesized from the knowledge base so that the result stays internally
consistent: years of experience follow the detected seniority, and
achievement bullets only mention skills that are on the resume.
"""

from datetime import date

from resume_agent.core.constants import (
    BACHELORS_DEGREE,
    BACHELORS_DURATION,
    BACHELORS_EXTRA_YEARS,
    BULLETS_PER_ROLE_RANGE,
    EDUCATION_YEARS_DEFAULT_RANGE,
    EMAIL_DOMAIN,
    EXPERIENCE_COUNT_RANGES,
    FALLBACK_SPECIALTY,
    FALLBACK_TECHNOLOGY,
    MASTERS_DEGREE,
    MASTERS_DURATION,
    MASTERS_EXTRA_YEARS,
    MONTH_ABBREVIATIONS,
    PHONE_LINE_RANGE,
    PHONE_PREFIX_RANGE,
    ROLE_DURATION_RANGE,
    SKILL_SAMPLE_RANGE,
    SUMMARY_DOMAIN_COUNT,
    SUMMARY_YEARS_DEFAULT_RANGE,
    SUMMARY_YEARS_RANGES,
)
from resume_agent.core.formatting import format_month_year, format_year, title_case
from resume_agent.core.knowledge_base import KnowledgeBase, load_knowledge_base
from resume_agent.core.logger import logger
from resume_agent.core.random_source import RandomSource
from resume_agent.models import (
    CandidateProfile,
    ExperienceLevel,
    JobAnalysis,
    ProfileEducation,
    ProfileExperience,
    ResumeEducation,
    ResumeExperience,
    ResumeTemplateData,
)

BULLET = "• "


def _given(value: str | None) -> str | None:
    """A profile string counts as provided only if it has visible content."""
    if value and value.strip():
        return value
    return None


def _profile_field(profile: CandidateProfile | None, name: str) -> str | None:
    if profile is None:
        return None
    return _given(getattr(profile, name))


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------


def build_contact(profile: CandidateProfile | None, kb: KnowledgeBase, rng: RandomSource) -> dict[str, str]:
    """Name, email, phone, location and links, real where available."""
    first_name = _profile_field(profile, "first_name") or rng.pick(kb.first_names)
    middle_name = _profile_field(profile, "middle_name") or ""
    last_name = _profile_field(profile, "last_name") or rng.pick(kb.last_names)

    parts = [first_name, middle_name, last_name] if middle_name else [first_name, last_name]
    full_name = " ".join(parts)
    username = f"{first_name.lower()}{last_name.lower()}".replace(" ", "")

    phone = _profile_field(profile, "phone") or (
        f"({rng.randint_in(PHONE_PREFIX_RANGE)}) "
        f"{rng.randint_in(PHONE_PREFIX_RANGE)}-{rng.randint_in(PHONE_LINE_RANGE)}"
    )

    return {
        "full_name": full_name,
        "email": _profile_field(profile, "email") or f"{username}@{EMAIL_DOMAIN}",
        "phone": phone,
        "location": _profile_field(profile, "location") or rng.pick(kb.locations),
        "linkedin": _profile_field(profile, "linkedin") or f"https://linkedin.com/in/{username}",
        "github": _profile_field(profile, "github") or f"https://github.com/{username}",
        "website": _profile_field(profile, "website") or _profile_field(profile, "portfolio") or "",
    }


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------


def _append_missing_technologies(skills: list[str], technologies: list[str]) -> list[str]:
    seen = {s.lower() for s in skills}
    for tech in technologies:
        if tech.lower() not in seen:
            skills.append(title_case(tech))
            seen.add(tech.lower())
    return skills


def build_skills(
    analysis: JobAnalysis,
    profile: CandidateProfile | None,
    rng: RandomSource,
) -> list[str]:
    """Profile skills plus detected technologies, or a random job-matched sample."""
    profile_skills = []
    if profile is not None:
        profile_skills = [s.name for s in profile.skills if _given(s.name)]

    if profile_skills:
        return _append_missing_technologies(profile_skills, analysis.detected_technologies)

    pool: list[str] = []
    seen: set[str] = set()
    for category in analysis.matched_categories:
        for skill in category.skills:
            if skill.lower() not in seen:
                pool.append(skill)
                seen.add(skill.lower())
    _append_missing_technologies(pool, analysis.detected_technologies)

    return rng.sample(pool, rng.randint_in(SKILL_SAMPLE_RANGE))


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def _sample_years(years_range: str, rng: RandomSource) -> int:
    return rng.randint_in(SUMMARY_YEARS_RANGES.get(years_range, SUMMARY_YEARS_DEFAULT_RANGE))


def build_summary(
    analysis: JobAnalysis,
    profile: CandidateProfile | None,
    kb: KnowledgeBase,
    rng: RandomSource,
) -> str:
    summary = _profile_field(profile, "summary")
    if summary:
        return summary

    if profile is not None and profile.years_of_experience:
        years = profile.years_of_experience
    else:
        years = _sample_years(analysis.years_range, rng)

    domains = ", ".join(c.name for c in analysis.matched_categories[:SUMMARY_DOMAIN_COUNT])
    specialty = (
        _profile_field(profile, "specialization")
        or kb.specialty_map.get(analysis.domain)
        or FALLBACK_SPECIALTY
    )

    template = rng.pick(kb.summary_templates)
    return (
        template
        .replace("{title}", analysis.detected_title)
        .replace("{years}", f"{years:g}")
        .replace("{domains}", domains)
        .replace("{specialty}", specialty)
        .replace("{passion}", rng.pick(kb.passions))
    )


# ---------------------------------------------------------------------------
# Work experience
# ---------------------------------------------------------------------------


def build_achievement_bullets(skills: list[str], kb: KnowledgeBase, rng: RandomSource) -> list[str]:
    """3-4 templated bullets; verb groups rotate with the bullet position."""
    bullets = []
    percentages = kb.metrics["percentage"]
    for position in range(rng.randint_in(BULLETS_PER_ROLE_RANGE)):
        template = rng.pick(kb.achievement_templates)
        _, verbs = kb.action_verbs[position % len(kb.action_verbs)]
        technology = rng.pick(skills) if skills else FALLBACK_TECHNOLOGY
        bullet = (
            template
            .replace("{verb}", rng.pick(verbs))
            .replace("{technology}", technology)
            .replace("{metric}", rng.pick(percentages))
            .replace("{outcome}", rng.pick(percentages))
        )
        bullets.append(BULLET + bullet)
    return bullets


def _describe_experience(exp: ProfileExperience, skills: list[str], kb: KnowledgeBase, rng: RandomSource) -> str:
    parts = []
    if _given(exp.description):
        parts.append(exp.description)
    achievements = [a for a in exp.achievements if _given(a)]
    if achievements:
        parts.append("\n".join(BULLET + a for a in achievements))
    if parts:
        return "\n".join(parts)

    # Nothing written for this role: fill in bullets about what was used there.
    return "\n".join(build_achievement_bullets(exp.technologies or skills, kb, rng))


def _map_profile_experiences(
    experiences: list[ProfileExperience],
    skills: list[str],
    kb: KnowledgeBase,
    rng: RandomSource,
) -> list[ResumeExperience]:
    return [
        ResumeExperience(
            company=exp.company,
            position=exp.position,
            start_date=format_month_year(exp.start_date),
            end_date="" if exp.current else format_month_year(exp.end_date),
            current=exp.current,
            description=_describe_experience(exp, skills, kb, rng),
        )
        for exp in experiences
    ]


def _synthesize_experiences(
    analysis: JobAnalysis,
    skills: list[str],
    kb: KnowledgeBase,
    rng: RandomSource,
    current_year: int,
) -> list[ResumeExperience]:
    count_range = EXPERIENCE_COUNT_RANGES.get(
        analysis.experience_level.value, EXPERIENCE_COUNT_RANGES[ExperienceLevel.JUNIOR.value]
    )
    count = rng.randint_in(count_range)

    general_companies = kb.company_names["general"]
    companies = rng.sample(kb.company_names.get(analysis.industry, general_companies), count)
    titles = kb.job_title_map.get(analysis.domain) or kb.job_title_map["general"]

    experiences = []
    end_year = current_year
    for i in range(count):
        is_current = i == 0
        start_year = end_year - rng.randint_in(ROLE_DURATION_RANGE)
        bullets = build_achievement_bullets(skills, kb, rng)

        experiences.append(ResumeExperience(
            company=companies[i] if i < len(companies) else rng.pick(general_companies),
            position=analysis.detected_title if i == 0 else titles[min(i, len(titles) - 1)],
            start_date=f"{rng.pick(MONTH_ABBREVIATIONS)} {start_year}",
            end_date="" if is_current else f"{rng.pick(MONTH_ABBREVIATIONS)} {end_year}",
            current=is_current,
            description="\n".join(bullets),
        ))
        end_year = start_year

    return experiences


def build_experiences(
    analysis: JobAnalysis,
    profile: CandidateProfile | None,
    skills: list[str],
    kb: KnowledgeBase,
    rng: RandomSource,
    current_year: int,
) -> tuple[list[ResumeExperience], bool]:
    """Returns (experiences, from_profile)."""
    usable = []
    if profile is not None:
        usable = [e for e in profile.experiences if _given(e.company) and _given(e.position)]
        if len(usable) < len(profile.experiences):
            logger.debug(f"Skipped {len(profile.experiences) - len(usable)} experience entries without company/position")

    if usable:
        return _map_profile_experiences(usable, skills, kb, rng), True
    return _synthesize_experiences(analysis, skills, kb, rng, current_year), False


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------


def _map_profile_education(education: list[ProfileEducation]) -> list[ResumeEducation]:
    return [
        ResumeEducation(
            school=edu.institution,
            degree=edu.degree,
            field=edu.field or "",
            start_date=format_year(edu.start_date),
            end_date=format_year(edu.end_date),
            description=f"GPA: {edu.gpa:g}" if edu.gpa else "",
        )
        for edu in education
    ]


def _synthesize_education(
    analysis: JobAnalysis,
    profile: CandidateProfile | None,
    kb: KnowledgeBase,
    rng: RandomSource,
    current_year: int,
) -> list[ResumeEducation]:
    if profile is not None and profile.years_of_experience:
        # whole years for calendar arithmetic
        years = round(profile.years_of_experience)
    else:
        senior_range = SUMMARY_YEARS_RANGES["7+"]
        years = rng.randint_in(senior_range if analysis.years_range == "7+" else EDUCATION_YEARS_DEFAULT_RANGE)

    is_senior = analysis.experience_level == ExperienceLevel.SENIOR
    template = rng.pick(kb.education_templates)
    degree = MASTERS_DEGREE if is_senior else template.degree
    grad_year = current_year - years - (MASTERS_EXTRA_YEARS if is_senior else BACHELORS_EXTRA_YEARS)
    duration = MASTERS_DURATION if "Master" in degree else BACHELORS_DURATION

    education = [ResumeEducation(
        school=template.school,
        degree=degree,
        field=rng.pick(template.fields),
        start_date=str(grad_year - duration),
        end_date=str(grad_year),
        description=rng.pick(template.descriptions),
    )]

    # Advanced degree implies an undergraduate one before it.
    if is_senior and len(kb.education_templates) > 1:
        undergrad = next(t for t in kb.education_templates if t is not template)
        education.append(ResumeEducation(
            school=undergrad.school,
            degree=BACHELORS_DEGREE,
            field=rng.pick(undergrad.fields),
            start_date=str(grad_year - MASTERS_DURATION - BACHELORS_DURATION),
            end_date=str(grad_year - MASTERS_DURATION),
            description=rng.pick(undergrad.descriptions),
        ))

    return education


def build_education(
    analysis: JobAnalysis,
    profile: CandidateProfile | None,
    kb: KnowledgeBase,
    rng: RandomSource,
    current_year: int,
) -> list[ResumeEducation]:
    usable = []
    if profile is not None:
        usable = [e for e in profile.education if _given(e.institution) and _given(e.degree)]
    if usable:
        return _map_profile_education(usable)
    return _synthesize_education(analysis, profile, kb, rng, current_year)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def assemble_resume(
    analysis: JobAnalysis,
    profile: CandidateProfile | None = None,
    *,
    kb: KnowledgeBase | None = None,
    rng: RandomSource | None = None,
    today: date | None = None,
) -> ResumeTemplateData:
    """Build a complete resume for the analyzed posting.

    Args:
        analysis: Output of the analyzer for this posting.
        profile: Optional candidate data; never modified.
        kb: Knowledge base override (defaults to the process-wide one).
        rng: Random source override; a fresh unseeded one by default.
        today: Reference date for synthesized timelines (defaults to today).
    """
    if kb is None:
        kb = load_knowledge_base()
    if rng is None:
        rng = RandomSource()
    current_year = (today or date.today()).year

    contact = build_contact(profile, kb, rng)
    skills = build_skills(analysis, profile, rng)
    summary = build_summary(analysis, profile, kb, rng)
    experiences, real_experience = build_experiences(analysis, profile, skills, kb, rng, current_year)
    education = build_education(analysis, profile, kb, rng, current_year)

    logger.info(
        f"Assembled resume: {len(experiences)} experiences, {len(education)} education, "
        f"{len(skills)} skills (experience data: {'real' if real_experience else 'generated'})",
        extra={"stage": "assemble"},
    )

    return ResumeTemplateData(
        **contact,
        summary=summary,
        experiences=experiences,
        education=education,
        skills=skills,
    )
