from __future__ import annotations


class ConfigurationError(ValueError):
    """Slack channel and token are not both configured."""


class TransportError(RuntimeError):
    """The chat.postMessage endpoint could not be reached."""
