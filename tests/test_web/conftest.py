from __future__ import annotations

from pathlib import Path

import pytest

from twstyle.generator import UtilityTable
from twstyle.synthesis import StyleComposer
from twstyle.web.app import create_app

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def composer():
    """Create a composer over the fixture utility CSS."""
    return StyleComposer(UtilityTable.from_file(FIXTURES / "utilities.css"))


@pytest.fixture
def app(composer):
    """Create a Flask app for testing."""
    application = create_app(composer=composer)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
