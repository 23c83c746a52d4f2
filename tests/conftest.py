import pytest
import requests

from deckgen.frequency.records import FrequencyRecord


class StubFrequencyClient:
    """Answers from a fixed table; unknown queries fail like a network error."""

    def __init__(self, table):
        self.table = dict(table)
        self.calls = []

    def fetch(self, query):
        self.calls.append(query)
        if query not in self.table:
            raise requests.ConnectionError(f"no route to frequency service for {query!r}")
        value = self.table[query]
        if isinstance(value, Exception):
            raise value
        hits, total = value
        return FrequencyRecord(hits=hits, total=total, frequency=0, query=query)


@pytest.fixture
def stub_client():
    return StubFrequencyClient


@pytest.fixture
def decks_dir(tmp_path):
    d = tmp_path / "decks"
    d.mkdir()
    return d


@pytest.fixture
def deck_dir(decks_dir):
    d = decks_dir / "german"
    d.mkdir()
    return d


@pytest.fixture
def write_csv():
    def _write(path, text):
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def clear_frequency_env(monkeypatch):
    monkeypatch.delenv("DECKGEN_DECKS_DIR", raising=False)
    monkeypatch.delenv("FREQUENCY_API_URL", raising=False)
    yield
