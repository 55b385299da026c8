"""Flatten a stored user + profile record into a CandidateProfile.

The profile service keeps a nested document (personalInfo.address,
professionalSummary, workExperience, ...). The engine only understands the
flat CandidateProfile shape, so callers convert with flatten_profile() before
invoking the pipeline. Dates become ISO strings; missing sections stay empty.
"""

from datetime import date
from typing import Any

from resume_agent.models import CandidateProfile


def _iso(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _location(address: dict | None) -> str:
    if not address:
        return ""
    return ", ".join(part for part in (address.get("city"), address.get("country")) if part)


def flatten_profile(user: dict | None, profile: dict | None) -> CandidateProfile:
    """Build the engine-facing profile from the stored user and profile documents.

    Either argument may be None. Unknown keys in the documents are ignored.
    """
    flat: dict[str, Any] = {}

    if user:
        flat["firstName"] = user.get("firstName")
        flat["middleName"] = user.get("middleName") or ""
        flat["lastName"] = user.get("lastName")
        flat["email"] = user.get("email")

    if not profile:
        return CandidateProfile.model_validate(flat)

    personal = profile.get("personalInfo")
    if personal:
        flat["phone"] = personal.get("phone") or ""
        flat["location"] = _location(personal.get("address"))
        flat["linkedin"] = personal.get("linkedin") or ""
        flat["github"] = personal.get("github") or ""
        flat["portfolio"] = personal.get("portfolio") or ""
        flat["website"] = personal.get("website") or ""

    summary = profile.get("professionalSummary")
    if summary:
        flat["summary"] = summary.get("summary") or ""
        flat["yearsOfExperience"] = summary.get("yearsOfExperience") or 0
        flat["specialization"] = summary.get("specialization") or ""

    flat["skills"] = [
        {
            "name": s.get("name"),
            "category": s.get("category"),
            "level": s.get("level"),
            "yearsOfExperience": s.get("yearsOfExperience"),
        }
        for s in profile.get("skills") or []
    ]

    flat["experiences"] = [
        {
            "company": e.get("company"),
            "position": e.get("position"),
            "location": e.get("location") or "",
            "startDate": _iso(e.get("startDate")),
            "endDate": _iso(e.get("endDate")),
            "current": bool(e.get("current")),
            "description": e.get("description") or "",
            "achievements": e.get("achievements") or [],
            "technologies": e.get("technologies") or [],
        }
        for e in profile.get("workExperience") or []
    ]

    flat["projects"] = [
        {
            "name": p.get("name"),
            "description": p.get("description") or "",
            "role": p.get("role") or "",
            "technologies": p.get("technologies") or [],
            "startDate": _iso(p.get("startDate")),
            "endDate": _iso(p.get("endDate")),
            "current": bool(p.get("current")),
            "githubUrl": p.get("githubUrl") or "",
            "demoUrl": p.get("demoUrl") or "",
        }
        for p in profile.get("projects") or []
    ]

    flat["education"] = [
        {
            "institution": ed.get("institution"),
            "degree": ed.get("degree"),
            "fieldOfStudy": ed.get("field") or "",
            "location": ed.get("location") or "",
            "startDate": _iso(ed.get("startDate")),
            "endDate": _iso(ed.get("endDate")),
            "gpa": ed.get("gpa"),
            "achievements": ed.get("achievements") or [],
        }
        for ed in profile.get("education") or []
    ]

    flat["certifications"] = [
        {
            "name": c.get("name"),
            "issuer": c.get("issuer"),
            "issueDate": _iso(c.get("issueDate")),
            "expiryDate": _iso(c.get("expiryDate")),
            "credentialId": c.get("credentialId") or "",
            "credentialUrl": c.get("credentialUrl") or "",
        }
        for c in profile.get("certifications") or []
    ]

    return CandidateProfile.model_validate(flat)
