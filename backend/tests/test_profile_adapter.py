"""Tests for flattening stored user/profile documents (resume_agent.services.profile_adapter)."""

import os
import sys
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from resume_agent.services.profile_adapter import flatten_profile

USER = {"firstName": "Jane", "lastName": "Doe", "email": "jane@example.com", "passwordHash": "x"}

PROFILE = {
    "personalInfo": {
        "phone": "555-0100",
        "address": {"street": "1 Main St", "city": "Lisbon", "country": "Portugal"},
        "linkedin": "https://linkedin.com/in/janedoe",
        "github": "",
        "portfolio": "https://janedoe.dev",
    },
    "professionalSummary": {
        "summary": "Payments engineer.",
        "yearsOfExperience": 6,
        "specialization": "payments",
    },
    "skills": [{"name": "Python", "category": "backend", "level": "expert", "yearsOfExperience": 6}],
    "workExperience": [
        {
            "company": "Acme Pay",
            "position": "Backend Engineer",
            "startDate": date(2022, 3, 1),
            "current": True,
            "description": "Ledger service.",
            "achievements": ["Cut latency by 40%"],
            "technologies": ["Python", "Kafka"],
        },
    ],
    "education": [
        {
            "institution": "University of Porto",
            "degree": "BSc",
            "field": "Computer Science",
            "startDate": "2015-09-01T00:00:00.000Z",
            "endDate": "2019-06-30T00:00:00.000Z",
            "gpa": 3.8,
        },
    ],
    "certifications": [{"name": "AWS SAA", "issuer": "Amazon", "issueDate": "2023-01-01"}],
    "projects": [{"name": "ledger-cli", "technologies": ["Rust"]}],
}


class TestFlattenProfile:

    def test_no_documents_gives_empty_profile(self):
        profile = flatten_profile(None, None)
        assert profile.first_name is None
        assert profile.skills == []
        assert profile.experiences == []

    def test_user_only(self):
        profile = flatten_profile(USER, None)
        assert profile.first_name == "Jane"
        assert profile.last_name == "Doe"
        assert profile.email == "jane@example.com"
        assert profile.middle_name == ""

    def test_personal_info(self):
        profile = flatten_profile(USER, PROFILE)
        assert profile.phone == "555-0100"
        assert profile.location == "Lisbon, Portugal"
        assert profile.linkedin == "https://linkedin.com/in/janedoe"
        assert profile.github == ""
        assert profile.portfolio == "https://janedoe.dev"

    def test_location_with_city_only(self):
        profile = flatten_profile(USER, {"personalInfo": {"address": {"city": "Porto"}}})
        assert profile.location == "Porto"

    def test_summary_section(self):
        profile = flatten_profile(USER, PROFILE)
        assert profile.summary == "Payments engineer."
        assert profile.years_of_experience == 6
        assert profile.specialization == "payments"

    def test_work_experience_becomes_experiences(self):
        profile = flatten_profile(USER, PROFILE)
        assert len(profile.experiences) == 1
        exp = profile.experiences[0]
        assert exp.company == "Acme Pay"
        assert exp.start_date == "2022-03-01"
        assert exp.end_date is None
        assert exp.current is True
        assert exp.achievements == ["Cut latency by 40%"]
        assert exp.technologies == ["Python", "Kafka"]

    def test_education_field_maps_to_field_of_study(self):
        profile = flatten_profile(USER, PROFILE)
        edu = profile.education[0]
        assert edu.field == "Computer Science"
        assert edu.start_date == "2015-09-01T00:00:00.000Z"
        assert edu.gpa == 3.8

    def test_certifications_and_projects(self):
        profile = flatten_profile(USER, PROFILE)
        assert profile.certifications[0].issuer == "Amazon"
        assert profile.projects[0].technologies == ["Rust"]

    def test_missing_sections_stay_empty(self):
        profile = flatten_profile(USER, {"personalInfo": {"phone": "1"}})
        assert profile.summary is None
        assert profile.skills == []
        assert profile.education == []

    def test_fractional_years_of_experience(self):
        profile = flatten_profile({"firstName": "A"}, {"professionalSummary": {"yearsOfExperience": 2.5}})
        assert profile.first_name == "A"
        assert profile.years_of_experience == 2.5

    def test_entries_with_missing_names_still_parse(self):
        profile = flatten_profile(USER, {
            "workExperience": [{"position": "Dev"}],
            "education": [{"degree": "BSc"}],
            "skills": [{"category": "x"}],
            "certifications": [{"issuer": "Amazon"}],
            "projects": [{"description": "Side project"}],
        })
        assert profile.experiences[0].company is None
        assert profile.experiences[0].position == "Dev"
        assert profile.education[0].institution is None
        assert profile.skills[0].name is None
        assert profile.certifications[0].name is None
        assert profile.projects[0].name is None
