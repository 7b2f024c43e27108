"""Command-line entry point for running a brand control audit."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

from brandaudit.audit.runner import AuditError
from brandaudit.config.loader import load_config
from brandaudit.report.render import render_html, render_text
from brandaudit.service import AuditService
from brandaudit.submission import Submission, SubmissionError

FAILURE_MESSAGE = "Failed to fetch results. Please check your API key or try again."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brandaudit",
        description="Audit how much of a business's search presence it controls.",
    )
    parser.add_argument("--name", default="", help="Submitter's full name")
    parser.add_argument("--email", default="", help="Submitter's email address")
    parser.add_argument("--company", default="", help="Business name to search for")
    parser.add_argument("--address", default="", help="Business street address")
    parser.add_argument("--phone", default="", help="Business phone number")
    parser.add_argument("--website", default="", help="Official business website")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json")
    parser.add_argument("--html", type=Path, default=None, help="Write the HTML report here")
    parser.add_argument("--json", type=Path, default=None, help="Write the report as JSON here")
    parser.add_argument(
        "--concurrent", action="store_true", help="Run the three searches in parallel"
    )
    parser.add_argument("--no-notify", action="store_true", help="Do not email the report")
    parser.add_argument(
        "--no-subscribe", action="store_true", help="Do not add the submitter to the mailing list"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    config = load_config(args.config)
    if args.concurrent:
        config.search.concurrent = True

    submission = Submission.from_dict(
        {
            "name": args.name,
            "email": args.email,
            "company": args.company,
            "address": args.address,
            "phone": args.phone,
            "website": args.website,
        }
    )
    service = AuditService(config)

    try:
        outcome = asyncio.run(
            service.submit(
                submission,
                notify=not args.no_notify,
                subscribe=not args.no_subscribe,
            )
        )
    except SubmissionError as e:
        for message in e.errors:
            print(message, file=sys.stderr)
        return 1
    except AuditError:
        print(FAILURE_MESSAGE, file=sys.stderr)
        return 1

    print(render_text(outcome.report))
    if args.html:
        args.html.parent.mkdir(parents=True, exist_ok=True)
        args.html.write_text(render_html(outcome.report), encoding="utf-8")
        print(f"\nHTML report: {args.html}")
    if args.json:
        args.json.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "submission": submission.to_dict(),
            "report": outcome.report.to_dict(),
            "notified": outcome.notified,
            "subscribed": outcome.subscribed,
        }
        args.json.write_text(json.dumps(data, indent=2), encoding="utf-8")
        print(f"JSON report: {args.json}")
    if outcome.subscribed:
        print("You've been subscribed to the newsletter.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
