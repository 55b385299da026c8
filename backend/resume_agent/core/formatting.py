"""Small text/date helpers shared by the analyzer and assembler."""

import re
from datetime import date, datetime

from resume_agent.core.constants import MONTH_ABBREVIATIONS

_WORD_START = re.compile(r"\b\w")

_PARTIAL_DATE_FORMATS = ("%Y-%m", "%Y/%m", "%m/%Y", "%Y")


def title_case(text: str) -> str:
    """Upper-case the first character of every word, leaving the rest as-is.

    Unlike str.title(), "GraphQL api" becomes "GraphQL Api", not "Graphql Api".
    """
    return _WORD_START.sub(lambda m: m.group().upper(), text)


def parse_date(value: str | date | None) -> date | None:
    """Parse an ISO date/datetime string (or a partial "YYYY-MM" / "YYYY")."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _PARTIAL_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_month_year(value: str | date | None) -> str:
    """"Mon YYYY" display form; unparseable input is returned verbatim."""
    if not value:
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year}"


def format_year(value: str | date | None) -> str:
    if not value:
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return str(parsed.year)
