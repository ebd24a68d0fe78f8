import requests
from jobfail_slack import cli

def test_dry_run_prints_message(capsys):
    assert cli.main(["--dry-run", "--level", "minimal", "--worker", "w1", "--queue", "mail"]) == 0
    assert capsys.readouterr().out.strip() == "w1 failed processing mail"

def test_missing_token_exits_2(monkeypatch):
    monkeypatch.delenv("SLACK_TOKEN", raising=False)
    assert cli.main(["--channel", "C", "--token", ""]) == 2

def test_posts_and_reports_transport_errors(monkeypatch):
    sent = []
    monkeypatch.setattr(requests, "post", lambda url, data=None, timeout=None: sent.append(data))
    assert cli.main(["--channel", "C", "--token", "T", "--message", "kaboom"]) == 0
    assert "kaboom" in sent[0]["text"]
    assert "in `_sample_failure'" in sent[0]["text"]

    def fail(*a, **kw):
        raise requests.ConnectionError("down")
    monkeypatch.setattr(requests, "post", fail)
    assert cli.main(["--channel", "C", "--token", "T"]) == 1
