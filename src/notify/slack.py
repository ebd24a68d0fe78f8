from __future__ import annotations
import logging
from typing import Optional

import requests

from ..config import SlackSettings
from ..errors import TransportError
from ..failure import FailureContext
from .formatter import render_text

log = logging.getLogger(__name__)


class SlackFailureNotifier:
    """Posts job failures to a Slack channel via chat.postMessage.

    Settings are shared read-only, so one instance may serve every worker
    thread. Each ``notify`` is a single POST; nothing is retried.
    """

    def __init__(self, settings: SlackSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session

    def is_configured(self) -> bool:
        return self.settings.is_configured()

    def text(self, ctx: FailureContext) -> str:
        return render_text(ctx, self.settings.level)

    def notify(self, ctx: FailureContext) -> None:
        if not self.is_configured():
            log.debug("[SLACK] Channel/token not configured; skipping %s failure.", ctx.queue)
            return
        params = {"channel": self.settings.channel, "token": self.settings.token, "text": self.text(ctx)}
        post = self.session.post if self.session is not None else requests.post
        try:
            post(self.settings.endpoint, data=params, timeout=self.settings.timeout)
        except requests.RequestException as e:
            if self.settings.swallow_errors:
                log.exception("[SLACK] Post failed: %s", e)
                return
            raise TransportError(f"Slack post to {self.settings.endpoint} failed: {e}") from e
        log.debug("[SLACK] Reported %s failure to %s", ctx.queue, self.settings.channel)
