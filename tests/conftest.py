import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _sentences(words, lengths):
    out = []
    index = 0
    for length in lengths:
        out.append(" ".join(words[index:index + length]) + ".")
        index += length
    return " ".join(out)


@pytest.fixture
def make_transcript():
    """Join ``words`` into sentences of the given lengths, each ending in a period."""
    return _sentences


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    import main

    with TestClient(main.app) as test_client:
        yield test_client
