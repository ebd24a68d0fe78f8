from .config import Level, SlackSettings, configure
from .errors import ConfigurationError, TransportError
from .failure import FailureContext
from .notify.slack import SlackFailureNotifier

__all__ = [
    "ConfigurationError",
    "FailureContext",
    "Level",
    "SlackFailureNotifier",
    "SlackSettings",
    "TransportError",
    "configure",
]
