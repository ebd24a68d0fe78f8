from __future__ import annotations
from pprint import pformat
from typing import Any

from ..config import Level
from ..failure import FailureContext

INDENT = "  "


def _indent(lines) -> str:
    return "\n".join(INDENT + l for l in lines)


def msg_worker(ctx: FailureContext) -> str:
    return f"{ctx.worker} failed processing {ctx.queue}"


def msg_payload(ctx: FailureContext) -> str:
    return "Payload:\n" + _indent(pformat(ctx.payload, sort_dicts=False).split("\n"))


def msg_exception(ctx: FailureContext, backtrace: bool) -> str:
    text = f"Exception:\n{ctx.exception}"
    if backtrace and ctx.backtrace:
        text += "\n" + _indent(ctx.backtrace)
    return text


def render_text(ctx: FailureContext, level: Any = Level.VERBOSE) -> str:
    level = Level.parse(level)
    if level is Level.MINIMAL:
        return msg_worker(ctx)
    if level is Level.COMPACT:
        return "\n".join([msg_worker(ctx), msg_payload(ctx), msg_exception(ctx, backtrace=False)])
    # verbose, and anything unrecognized
    return "\n".join([msg_worker(ctx), msg_payload(ctx), msg_exception(ctx, backtrace=True)])
