"""End-to-end tests for the generation pipeline (resume_agent.services.generator).

These run the real analyzer, assembler and validator together and check the
properties every generated resume must hold, whatever the input.
"""

import os
import sys
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from resume_agent.core.formatting import title_case
from resume_agent.core.knowledge_base import load_knowledge_base
from resume_agent.core.random_source import RandomSource
from resume_agent.models import (
    CandidateProfile,
    ExperienceLevel,
    ProfileExperience,
    ProfileSkill,
)
from resume_agent.services.generator import generate_resume, run_generation
from resume_agent.services.validator import validate_and_polish
from conftest import FINTECH_JD, SENIOR_BACKEND_JD, TODAY

KB = load_knowledge_base()
CATEGORIES = {c.name: c for c in KB.skill_categories}

POSTINGS = [
    "",
    "   ",
    SENIOR_BACKEND_JD,
    FINTECH_JD,
    "Junior frontend developer to build React and Vue interfaces for a retail marketplace.",
    "Lead data scientist: machine learning, pandas, pytorch, statistics, healthcare analytics.",
    "x" * 15_000,
]

PROFILES = [
    None,
    CandidateProfile(),
    CandidateProfile(first_name="  ", summary="", skills=[ProfileSkill(name=" ")]),
    CandidateProfile(first_name="Ada", skills=[ProfileSkill(name="Python")], years_of_experience=4),
]


def _assert_complete(resume):
    assert resume.full_name.strip()
    assert resume.summary.strip()
    assert resume.skills
    assert len({s.lower() for s in resume.skills}) == len(resume.skills)
    assert len(resume.experiences) >= 1
    assert len(resume.education) >= 1
    assert all(exp.description.strip() for exp in resume.experiences)


class TestGenerationInvariants:

    @pytest.mark.parametrize("posting", POSTINGS)
    @pytest.mark.parametrize("profile", PROFILES)
    def test_every_resume_is_complete(self, posting, profile):
        for seed in range(5):
            resume = generate_resume(posting, profile, rng=RandomSource(seed=seed), today=TODAY)
            _assert_complete(resume)

    @pytest.mark.parametrize("posting", POSTINGS)
    def test_output_is_already_polished(self, posting):
        resume = generate_resume(posting, rng=RandomSource(seed=3), today=TODAY)
        assert validate_and_polish(resume) == resume

    @pytest.mark.parametrize("profile", PROFILES)
    def test_profile_not_mutated(self, profile):
        before = profile.model_dump() if profile else None
        generate_resume(SENIOR_BACKEND_JD, profile, rng=RandomSource(seed=1), today=TODAY)
        assert (profile.model_dump() if profile else None) == before

    def test_default_random_source_still_valid(self):
        _assert_complete(generate_resume(SENIOR_BACKEND_JD))


class TestGenerationScenarios:

    @pytest.mark.parametrize("seed", range(20))
    def test_senior_backend_posting_without_profile(self, seed):
        result = run_generation(SENIOR_BACKEND_JD, rng=RandomSource(seed=seed), today=TODAY)
        analysis, resume = result.analysis, result.resume

        assert analysis.experience_level == ExperienceLevel.SENIOR
        assert {"node.js", "aws", "docker"} <= set(analysis.detected_technologies)

        allowed = (
            set(CATEGORIES["Backend"].skills)
            | set(CATEGORIES["Cloud & DevOps"].skills)
            | {title_case(t) for t in analysis.detected_technologies}
        )
        assert 10 <= len(resume.skills) <= 14
        assert set(resume.skills) <= allowed

        assert 3 <= len(resume.experiences) <= 4
        assert "Senior" in resume.experiences[0].position
        assert resume.experiences[0].current is True

        assert len(resume.education) == 2
        assert resume.education[0].degree == "Master of Science"

    def test_profile_skill_plus_detected_technology(self):
        posting = (
            "We need a developer comfortable with react and python to build dashboards "
            "for our analytics team, working closely with designers."
        )
        profile = CandidateProfile(skills=[ProfileSkill(name="Python")])

        resume = generate_resume(posting, profile, rng=RandomSource(seed=1), today=TODAY)

        assert "Python" in resume.skills
        assert "React" in resume.skills
        assert [s.lower() for s in resume.skills].count("python") == 1

    def test_profile_experience_kept_in_order(self):
        profile = CandidateProfile(experiences=[
            ProfileExperience(company="Acme", position="Engineer", start_date="2023-01-01", current=True,
                              description="Current role."),
            ProfileExperience(company="Globex", position="Intern", start_date="2021-05-01",
                              end_date="2022-12-01", description="Previous role."),
        ])

        resume = generate_resume(FINTECH_JD, profile, rng=RandomSource(seed=1), today=TODAY)

        assert [e.company for e in resume.experiences] == ["Acme", "Globex"]
        assert resume.experiences[0].current is True
        assert resume.experiences[0].end_date == ""
        assert resume.experiences[1].end_date == "Dec 2022"

    def test_fintech_posting_synthesizes_finance_companies(self):
        result = run_generation(FINTECH_JD, rng=RandomSource(seed=8), today=TODAY)
        assert result.analysis.industry == "finance"
        assert {e.company for e in result.resume.experiences} <= set(KB.company_names["finance"])

    def test_mixed_seniority_prefers_senior(self):
        result = run_generation(
            "Senior or junior candidates welcome to apply for this role.",
            rng=RandomSource(seed=1), today=TODAY,
        )
        assert result.analysis.experience_level == ExperienceLevel.SENIOR
        assert result.analysis.years_range == "7+"

    def test_same_seed_same_resume(self):
        first = generate_resume(FINTECH_JD, rng=RandomSource(seed=42), today=TODAY)
        second = generate_resume(FINTECH_JD, rng=RandomSource(seed=42), today=TODAY)
        assert first == second

    def test_synthesized_dates_follow_reference_date(self):
        resume = generate_resume(SENIOR_BACKEND_JD, rng=RandomSource(seed=5), today=date(2030, 6, 1))
        start_year = int(resume.experiences[0].start_date.split()[-1])
        assert 2027 <= start_year <= 2029
