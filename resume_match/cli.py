"""
Command line entry point for resume_match.

Usage:
    resume-match resume.pdf job.txt                # Text report
    resume-match resume.docx job.txt --json        # JSON output
    resume-match resume.pdf job.txt --verbose      # Debug logging
    resume-match resume.pdf job.txt --vocabulary=skills.txt
"""

import sys
import json
import asyncio
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from .analyzer import AnalysisResult, ResumeAnalyzer
from .config import MatchConfig
from .exceptions import ResumeMatchError
from .extractors import extract_file
from .logging_config import get_logger, setup_logging

logger = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='resume-match',
        description='Score how well a resume matches a job description.',
    )
    parser.add_argument('resume', type=Path, help='Resume file (PDF, DOCX or TXT)')
    parser.add_argument('job', type=Path, help='Job description file (PDF, DOCX or TXT)')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--vocabulary', type=Path, help='Custom skill vocabulary file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def format_report(result: AnalysisResult) -> str:
    """Render an analysis result as a plain text report."""
    lines = [
        f"Overall match: {result.overall_score}% ({result.match_band})",
        "",
        "Score breakdown:",
    ]
    for section, score in result.section_scores.items():
        lines.append(f"  {section.capitalize():<12}{score:>4}%")

    lines.append("")
    lines.append(f"Matched skills: {', '.join(result.matched_skills) or 'none'}")
    lines.append(f"Missing skills: {', '.join(result.missing_skills) or 'none'}")

    if result.recommendations:
        lines.append("")
        lines.append("Recommendations:")
        lines.extend(f"  - {rec}" for rec in result.recommendations)

    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = MatchConfig.from_env()
    if args.vocabulary:
        config.vocabulary_path = args.vocabulary

    setup_logging(level=logging.DEBUG if args.verbose else config.log_level)

    try:
        resume_text = extract_file(args.resume)
        job_text = extract_file(args.job)

        analyzer = ResumeAnalyzer(config=config)
        result = asyncio.run(analyzer.analyze(
            resume_text,
            job_text,
            on_progress=lambda progress: logger.debug(f"Progress: {progress}%"),
        ))
    except (ResumeMatchError, OSError) as e:
        logger.error(f"{e}")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
