# tests/conftest.py

from pathlib import Path

import pytest

from feedmark.models import ENTITY, LINK, TWITTER_USERNAME

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def feed() -> str:
    return "Obama visited Facebook headquarters: http://bit.ly/xyz @elversatile"


@pytest.fixture
def spans():
    return [
        {"start": 14, "end": 22, "type": ENTITY},
        {"start": 0, "end": 5, "type": ENTITY},
        {"start": 55, "end": 67, "type": TWITTER_USERNAME},
        {"start": 37, "end": 54, "type": LINK},
    ]


@pytest.fixture
def expected_html() -> str:
    return (
        "<strong>Obama</strong> visited <strong>Facebook</strong>"
        ' headquarters: <a href="http://bit.ly/xyz">http://bit.ly/xyz </a> @'
        ' <a href="http://twitter.com/elversatile">elversatile</a>'
    )


@pytest.fixture
def markup_config() -> str:
    return str(ROOT / "configs" / "markup.yaml")
