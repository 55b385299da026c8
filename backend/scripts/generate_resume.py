"""Generate a tailored resume from a job description file, offline.

Prints the resume as camelCase JSON (the same shape the API returns in
"data"). Useful for eyeballing template output without running the server.

Usage:
    python scripts/generate_resume.py posting.txt
    python scripts/generate_resume.py posting.txt --profile profile.json --seed 7
    python scripts/generate_resume.py posting.txt --analysis
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from resume_agent.core.random_source import RandomSource  # noqa: E402
from resume_agent.models import CandidateProfile, JobAnalysisSummary  # noqa: E402
from resume_agent.services.generator import run_generation  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a resume tailored to a job description.")
    parser.add_argument("job_description", type=Path, help="Text file containing the job posting")
    parser.add_argument("--profile", type=Path, help="JSON file with a flat candidate profile")
    parser.add_argument("--seed", type=int, help="Seed the random source (reproducible output)")
    parser.add_argument("--analysis", action="store_true", help="Also print the job analysis")
    args = parser.parse_args()

    text = args.job_description.read_text(encoding="utf-8").strip()
    if not text:
        print(f"ERROR: {args.job_description} is empty", file=sys.stderr)
        sys.exit(1)

    profile = None
    if args.profile:
        profile = CandidateProfile.model_validate_json(args.profile.read_text(encoding="utf-8"))

    result = run_generation(text, profile, rng=RandomSource(seed=args.seed))

    output = {"data": result.resume.model_dump(by_alias=True)}
    if args.analysis:
        output["analysis"] = JobAnalysisSummary.from_analysis(result.analysis).model_dump(by_alias=True, mode="json")
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
