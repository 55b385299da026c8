"""Step 1: Analyze a job posting into a structured JobAnalysis.

Pure Python heuristics, no LLM: substring keyword scoring, ordered regex
matching and TF-IDF term ranking. Never raises on string input; a blank
posting yields the all-default analysis.
"""

import re

from sklearn.feature_extraction.text import TfidfVectorizer

from resume_agent.core.constants import (
    DEFAULT_DOMAIN,
    DEFAULT_EXPERIENCE_LEVEL,
    DEFAULT_INDUSTRY,
    DEFAULT_TITLE,
    DEFAULT_YEARS_RANGE,
    FALLBACK_CATEGORY_COUNT,
    MAX_MATCHED_CATEGORIES,
    MAX_RANKED_TERMS,
    MIN_KEYWORD_LENGTH,
)
from resume_agent.core.formatting import title_case
from resume_agent.core.knowledge_base import KnowledgeBase, load_knowledge_base
from resume_agent.core.logger import logger
from resume_agent.models import ExperienceLevel, JobAnalysis, SkillCategory


def _count_hits(keywords, lower_text: str) -> int:
    return sum(1 for kw in keywords if kw in lower_text)


def detect_seniority(lower_text: str, kb: KnowledgeBase) -> tuple[ExperienceLevel, str]:
    """First pattern with any keyword hit wins; patterns are checked in table order."""
    for pattern in kb.seniority_patterns:
        if any(kw in lower_text for kw in pattern.keywords):
            return pattern.level, pattern.years_range
    return ExperienceLevel(DEFAULT_EXPERIENCE_LEVEL), DEFAULT_YEARS_RANGE


def match_skill_categories(lower_text: str, kb: KnowledgeBase) -> list[SkillCategory]:
    """Top categories by keyword hit count, never empty."""
    scored = []
    for category in kb.skill_categories:
        score = _count_hits(category.keywords, lower_text)
        if score > 0:
            scored.append((category, score))

    # list.sort is stable: equal scores keep table order
    scored.sort(key=lambda cs: cs[1], reverse=True)
    matched = [cat for cat, _ in scored[:MAX_MATCHED_CATEGORIES]]
    if not matched:
        matched = list(kb.skill_categories[:FALLBACK_CATEGORY_COUNT])
    return matched


def classify_domain(lower_text: str, kb: KnowledgeBase) -> str:
    """Domain with the most keyword hits; ties go to the first declared."""
    best_domain, best_score = DEFAULT_DOMAIN, 0
    for domain, keywords in kb.domain_keywords:
        score = _count_hits(keywords, lower_text)
        if score > best_score:
            best_domain, best_score = domain, score
    return best_domain


def classify_industry(lower_text: str, kb: KnowledgeBase) -> str:
    """First declared industry with any keyword hit. Not a max-count vote."""
    for industry, keywords in kb.industry_keywords:
        if any(kw in lower_text for kw in keywords):
            return industry
    return DEFAULT_INDUSTRY


def extract_keywords(text: str, kb: KnowledgeBase) -> list[str]:
    """Highest-weighted TF-IDF terms of the posting.

    With a single document every term shares the same IDF, so this is a
    term-frequency ranking. Ties are broken alphabetically.
    """
    vectorizer = TfidfVectorizer(stop_words="english")
    try:
        matrix = vectorizer.fit_transform([text])
    except ValueError:
        # empty vocabulary: blank text or nothing but stop words
        logger.debug("No rankable terms in job description")
        return []

    terms = vectorizer.get_feature_names_out()
    weights = matrix.toarray()[0]
    ranked = sorted(zip(terms, weights), key=lambda tw: tw[1], reverse=True)

    return [
        str(term) for term, _ in ranked[:MAX_RANKED_TERMS]
        if len(term) >= MIN_KEYWORD_LENGTH and term not in kb.stop_words
    ]


def detect_technologies(lower_text: str, kb: KnowledgeBase) -> list[str]:
    """Every known technology mentioned, in scan-list order."""
    return [tech for tech in kb.technology_patterns if tech in lower_text]


def detect_title(text: str, domain: str, kb: KnowledgeBase) -> str:
    """Rank-prefixed title from the posting, else the domain's default title."""
    for title_pattern in kb.title_patterns:
        match = re.search(title_pattern.pattern, text, re.IGNORECASE)
        if match:
            return title_pattern.prefix + title_case(match.group(1))

    titles = kb.job_title_map.get(domain)
    if titles:
        return titles[0]
    return DEFAULT_TITLE


def analyze_job_description(job_description: str, kb: KnowledgeBase | None = None) -> JobAnalysis:
    """Run every classifier over the posting and bundle the results."""
    if kb is None:
        kb = load_knowledge_base()
    lower_text = job_description.lower()

    experience_level, years_range = detect_seniority(lower_text, kb)
    matched_categories = match_skill_categories(lower_text, kb)
    domain = classify_domain(lower_text, kb)
    industry = classify_industry(lower_text, kb)
    extracted_keywords = extract_keywords(job_description, kb)
    detected_technologies = detect_technologies(lower_text, kb)
    detected_title = detect_title(job_description, domain, kb)

    logger.info(
        f"Analysis: '{detected_title}' ({experience_level.value}), domain={domain}, "
        f"industry={industry}, {len(matched_categories)} categories, "
        f"{len(detected_technologies)} technologies",
        extra={"stage": "analyze"},
    )

    return JobAnalysis(
        detected_title=detected_title,
        domain=domain,
        experience_level=experience_level,
        years_range=years_range,
        matched_categories=matched_categories,
        extracted_keywords=extracted_keywords,
        detected_technologies=detected_technologies,
        industry=industry,
    )
