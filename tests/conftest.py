"""Pytest configuration and shared fixtures."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================================
# Configuration
# ============================================================================

@pytest.fixture(autouse=True)
def fresh_config():
    """Rebuild the configuration singleton around every test."""
    from core.config import reset_config

    reset_config()
    yield
    reset_config()


# ============================================================================
# Selector Fixtures
# ============================================================================

@pytest.fixture
def builder():
    """Empty selector builder."""
    from core.selectors import SelectorBuilder

    return SelectorBuilder()


@pytest.fixture
def css():
    """The shared selector facade."""
    from core.selectors import css_selector_builder

    return css_selector_builder


# ============================================================================
# Flask Fixtures
# ============================================================================

@pytest.fixture
def app():
    """Flask application configured for testing."""
    from api import create_app

    return create_app(testing=True)


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
