"""Centralized constants: no magic numbers in service code."""

# Job description limits (enforced at the HTTP boundary, not by the engine)
MIN_JD_LENGTH = 50  # chars, after trimming
MAX_JD_LENGTH = 15_000  # chars

# Rate limiting
RATE_LIMIT_PER_MINUTE = 20

# Analyzer
MAX_MATCHED_CATEGORIES = 4
FALLBACK_CATEGORY_COUNT = 2  # first N categories used when nothing matches
MAX_RANKED_TERMS = 30  # TF-IDF terms considered before filtering
MIN_KEYWORD_LENGTH = 3
DEFAULT_EXPERIENCE_LEVEL = "Mid-Level"
DEFAULT_YEARS_RANGE = "3-5"
DEFAULT_DOMAIN = "general"
DEFAULT_INDUSTRY = "tech"
DEFAULT_TITLE = "Software Developer"

# Assembler (closed ranges)
SKILL_SAMPLE_RANGE = (10, 14)
EXPERIENCE_COUNT_RANGES = {
    "Senior": (3, 4),
    "Mid-Level": (2, 3),
    "Junior": (1, 2),
}
SUMMARY_YEARS_RANGES = {
    "7+": (7, 12),
    "3-5": (3, 6),
}
SUMMARY_YEARS_DEFAULT_RANGE = (1, 2)
EDUCATION_YEARS_DEFAULT_RANGE = (3, 6)
ROLE_DURATION_RANGE = (1, 3)  # years per synthesized role
BULLETS_PER_ROLE_RANGE = (3, 4)
SUMMARY_DOMAIN_COUNT = 3
PHONE_PREFIX_RANGE = (200, 999)
PHONE_LINE_RANGE = (1000, 9999)
FALLBACK_TECHNOLOGY = "modern technologies"
FALLBACK_SPECIALTY = "software"
EMAIL_DOMAIN = "email.com"

# Education
MASTERS_DEGREE = "Master of Science"
BACHELORS_DEGREE = "Bachelor of Science"
MASTERS_EXTRA_YEARS = 6  # years between a master's graduation and career start
BACHELORS_EXTRA_YEARS = 4
MASTERS_DURATION = 2
BACHELORS_DURATION = 4

# Validator placeholders
PLACEHOLDER_NAME = "Alex Johnson"
PLACEHOLDER_SUMMARY = "Experienced software professional with a strong track record."
PLACEHOLDER_SKILLS = ("JavaScript", "TypeScript", "Problem Solving")

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
