"""Resume generation endpoint: job description (plus optional profile) in, resume JSON out."""

import asyncio
import time

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_agent.config import load_settings
from resume_agent.core.constants import MAX_JD_LENGTH, MIN_JD_LENGTH
from resume_agent.core.logger import logger
from resume_agent.models import GenerateRequest, GenerateResponse, JobAnalysisSummary
from resume_agent.services.generator import run_generation

router = APIRouter(prefix="/api/v1/resume-generator", tags=["Resume Generator"])
limiter = Limiter(key_func=get_remote_address)

settings = load_settings()


def _validate_job_description(job_description: str) -> str:
    """Trim and length-check the posting. Raises HTTPException(400) on violation."""
    text = job_description.strip()
    if len(text) < MIN_JD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Job description is required and must be at least {MIN_JD_LENGTH} characters long",
        )
    if len(text) > MAX_JD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Job description must not exceed {MAX_JD_LENGTH:,} characters",
        )
    return text


@router.post("/generate", response_model=GenerateResponse)
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
async def generate(request: Request, payload: GenerateRequest):
    """Generate a resume tailored to the posting, filling gaps in the profile."""
    job_description = _validate_job_description(payload.job_description)
    profile = payload.user_profile
    if profile is not None and (profile.first_name or profile.last_name):
        logger.info(f"Resume generation requested for {profile.first_name or ''} {profile.last_name or ''}".rstrip())
    else:
        logger.info("Resume generation requested (no profile)")

    start = time.time()
    # CPU-bound; keep it off the event loop
    result = await asyncio.to_thread(run_generation, job_description, profile)
    elapsed_ms = int((time.time() - start) * 1000)

    return GenerateResponse(
        data=result.resume,
        analysis=JobAnalysisSummary.from_analysis(result.analysis),
        processing_time_ms=elapsed_ms,
    )
