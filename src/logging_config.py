import logging, sys

def setup_logging(level: int = logging.INFO) -> None:
    """Route every logger, jobfail_slack's [SLACK] lines included, to stdout."""
    handler = logging.StreamHandler(sys.stdout)
    fmt = logging.Formatter("[%(levelname)s] %(asctime)s - %(name)s: %(message)s", "%H:%M:%S")
    handler.setFormatter(fmt)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
