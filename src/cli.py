"""Send a test failure notification to Slack.

    jobfail-slack --channel C0123 --token xoxb-... --level compact
    jobfail-slack --dry-run --level minimal
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import Level, SLACK_URL, SlackSettings, configure
from .errors import ConfigurationError, TransportError
from .failure import FailureContext
from .logging_config import setup_logging
from .notify.slack import SlackFailureNotifier

log = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jobfail-slack", description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--channel", default=os.getenv("SLACK_CHANNEL", ""))
    p.add_argument("--token", default=os.getenv("SLACK_TOKEN", ""))
    p.add_argument("--level", default=os.getenv("SLACK_LEVEL", Level.VERBOSE.value),
                   help="verbose | compact | minimal (anything else means verbose)")
    p.add_argument("--api-url", default=SLACK_URL)
    p.add_argument("--timeout", type=float, default=10.0)
    p.add_argument("--worker", default="jobfail-slack")
    p.add_argument("--queue", default="test")
    p.add_argument("--payload", default='{"class": "TestJob", "args": []}', help="JSON job payload")
    p.add_argument("--message", default="Test failure from jobfail-slack")
    p.add_argument("--dry-run", action="store_true", help="print the message instead of posting it")
    p.add_argument("--debug", action="store_true")
    return p


def _sample_failure(args: argparse.Namespace) -> FailureContext:
    payload = json.loads(args.payload)
    try:
        raise RuntimeError(args.message)
    except RuntimeError as e:
        return FailureContext.from_exception(args.worker, args.queue, payload, e)


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    ctx = _sample_failure(args)
    if args.dry_run:
        settings = SlackSettings(level=args.level)
        print(SlackFailureNotifier(settings).text(ctx))
        return 0

    try:
        settings = configure(args.channel, args.token, args.level,
                             api_url=args.api_url, timeout=args.timeout)
    except ConfigurationError as e:
        log.error("[SLACK] %s", e)
        return 2
    try:
        SlackFailureNotifier(settings).notify(ctx)
    except TransportError as e:
        log.error("[SLACK] %s", e)
        return 1
    log.info("[SLACK] Test notification posted to %s", settings.channel)
    return 0


if __name__ == "__main__":
    sys.exit(main())
