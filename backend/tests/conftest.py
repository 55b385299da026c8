"""Shared fixtures for resume-agent backend tests."""

import os
import sys
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from resume_agent.core.knowledge_base import load_knowledge_base
from resume_agent.core.random_source import RandomSource
from resume_agent.main import app
from resume_agent.models import (
    CandidateProfile,
    ProfileEducation,
    ProfileExperience,
    ProfileSkill,
)
from resume_agent.routes import generator as generator_route


@pytest.fixture(autouse=True)
def _disable_rate_limiter():
    """Disable slowapi rate limiting for all tests."""
    app.state.limiter.enabled = False
    generator_route.limiter.enabled = False
    yield
    app.state.limiter.enabled = True
    generator_route.limiter.enabled = True


# ---------------------------------------------------------------------------
# Sample postings
# ---------------------------------------------------------------------------

# Hits only the Backend and Cloud & DevOps skill categories.
SENIOR_BACKEND_JD = (
    "Senior Backend Engineer wanted. You will write Node.js services and REST APIs, "
    "ship images with Docker, and run workloads on AWS. We value ownership, clear "
    "communication and steady delivery across the team."
)

FINTECH_JD = (
    "Join our fintech startup building a SaaS platform for small businesses. "
    "You will work on payment flows with Python and PostgreSQL, ship product "
    "features weekly and collaborate with a friendly software team."
)

TODAY = date(2026, 1, 15)


@pytest.fixture()
def kb():
    return load_knowledge_base()


@pytest.fixture()
def rng():
    """Deterministic random source."""
    return RandomSource(seed=1234)


@pytest.fixture()
def full_profile():
    """A realistic, fully populated candidate profile."""
    return CandidateProfile(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        phone="(555) 123-4567",
        location="Lisbon, Portugal",
        linkedin="https://linkedin.com/in/janedoe",
        github="https://github.com/janedoe",
        portfolio="https://janedoe.dev",
        summary="Backend engineer focused on payments infrastructure.",
        years_of_experience=6,
        specialization="payments",
        skills=[
            ProfileSkill(name="Python", category="backend", level="expert"),
            ProfileSkill(name="PostgreSQL", category="database", level="advanced"),
        ],
        experiences=[
            ProfileExperience(
                company="Acme Pay",
                position="Backend Engineer",
                start_date="2022-03-01",
                current=True,
                description="Own the ledger service.",
                achievements=["Cut settlement latency by 40%", "Led the Kafka migration"],
            ),
            ProfileExperience(
                company="Globex",
                position="Software Engineer",
                start_date="2019-06-15",
                end_date="2022-02-28",
                current=False,
                description="Built internal billing tools.",
            ),
        ],
        education=[
            ProfileEducation(
                institution="University of Porto",
                degree="Bachelor of Science",
                field="Computer Science",
                start_date="2015-09-01",
                end_date="2019-06-30",
                gpa=3.8,
            ),
        ],
    )
