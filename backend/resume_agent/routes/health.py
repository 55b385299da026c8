"""Liveness endpoint."""

import time

from fastapi import APIRouter

from resume_agent.config import load_settings
from resume_agent.core.knowledge_base import load_knowledge_base

router = APIRouter(tags=["System"])

_start_time = time.monotonic()


@router.get("/api/health")
async def health():
    settings = load_settings()
    kb = load_knowledge_base()
    return {
        "status": "ok",
        "service": settings.service_name,
        "version": settings.service_version,
        "uptime_seconds": round(time.monotonic() - _start_time),
        "knowledge_base": {
            "skill_categories": len(kb.skill_categories),
            "technologies": len(kb.technology_patterns),
        },
    }
