import pytest

from match_json.settings import get_settings


class RecordingSink:
    """Collects diagnostics as (level, event, fields) tuples."""

    def __init__(self):
        self.records = []

    def _record(self, level, event, **kw):
        self.records.append((level, event, kw))

    def info(self, event, **kw):
        self._record("info", event, **kw)

    def warning(self, event, **kw):
        self._record("warning", event, **kw)

    def error(self, event, **kw):
        self._record("error", event, **kw)

    def events(self, level):
        return [event for lvl, event, _ in self.records if lvl == level]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def response_xml(match_details="", extra=""):
    """Wrap MatchDetails markup in a minimal Response/ResultBlock document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<Response><ResultBlock>"
        '<ErrorWarnings><Errors errorCount="0" /></ErrorWarnings>'
        f"{match_details}"
        "<API><RetStatus>SUCCESS</RetStatus></API>"
        f"{extra}"
        "</ResultBlock></Response>"
    )


@pytest.fixture
def make_xml():
    return response_xml
