import pytest
from jobfail_slack.config import Level, SlackSettings, configure
from jobfail_slack.errors import ConfigurationError

def test_configure_requires_channel_and_token():
    with pytest.raises(ConfigurationError):
        configure(channel="", token="T")
    with pytest.raises(ConfigurationError):
        configure(channel="C")
    settings = configure(channel="C", token="T")
    assert settings.is_configured()

def test_partial_configure_on_top_of_base():
    base = SlackSettings(channel="C")
    assert not base.is_configured()
    settings = configure(token="T", base=base)
    assert (settings.channel, settings.token) == ("C", "T")
    assert base.token == ""

def test_level_defaults_and_coerces_to_verbose():
    assert SlackSettings().level is Level.VERBOSE
    assert SlackSettings(level="compact").level is Level.COMPACT
    assert SlackSettings(level=Level.MINIMAL).level is Level.MINIMAL
    assert SlackSettings(level="nope").level is Level.VERBOSE
    assert configure("C", "T", level=42).level is Level.VERBOSE

def test_settings_are_read_only():
    settings = configure("C", "T")
    with pytest.raises(Exception):
        settings.channel = "other"

def test_unknown_or_invalid_options_raise_configuration_error():
    with pytest.raises(ConfigurationError):
        configure("C", "T", webhook="x")
    with pytest.raises(ConfigurationError):
        configure("C", "T", timeout="soon")

def test_endpoint():
    assert SlackSettings().endpoint == "https://slack.com/api/chat.postMessage"
    assert SlackSettings(api_url="http://localhost:9000/api/").endpoint == "http://localhost:9000/api/chat.postMessage"
