"""Resume generation pipeline: analyze -> assemble -> validate.

Pure Python, synchronous and stateless across calls. The only shared state is
the read-only knowledge base; each call gets its own random source.
"""

from dataclasses import dataclass
from datetime import date

from resume_agent.core.knowledge_base import KnowledgeBase, load_knowledge_base
from resume_agent.core.logger import logger
from resume_agent.core.random_source import RandomSource
from resume_agent.models import CandidateProfile, JobAnalysis, ResumeTemplateData
from resume_agent.services.analyzer import analyze_job_description
from resume_agent.services.assembler import assemble_resume
from resume_agent.services.validator import validate_and_polish


@dataclass
class GenerationResult:
    analysis: JobAnalysis
    resume: ResumeTemplateData


def run_generation(
    job_description: str,
    profile: CandidateProfile | None = None,
    *,
    kb: KnowledgeBase | None = None,
    rng: RandomSource | None = None,
    today: date | None = None,
) -> GenerationResult:
    """Run all three steps and keep the intermediate analysis for display."""
    if kb is None:
        kb = load_knowledge_base()
    if rng is None:
        rng = RandomSource()

    logger.info("Resume generation started")
    analysis = analyze_job_description(job_description, kb=kb)
    resume = assemble_resume(analysis, profile, kb=kb, rng=rng, today=today)
    polished = validate_and_polish(resume)
    logger.info("Resume generation complete")

    return GenerationResult(analysis=analysis, resume=polished)


def generate_resume(
    job_description: str,
    profile: CandidateProfile | None = None,
    *,
    kb: KnowledgeBase | None = None,
    rng: RandomSource | None = None,
    today: date | None = None,
) -> ResumeTemplateData:
    """Generate a complete resume tailored to `job_description`.

    Input length limits are the caller's job; any string is accepted here.
    """
    return run_generation(job_description, profile, kb=kb, rng=rng, today=today).resume
