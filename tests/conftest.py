"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project directory to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest

from tests.factories import DraftFactory, ProductFactory


# ===================
# DRAFT FIXTURES
# ===================

@pytest.fixture
def valid_draft():
    """A draft that passes every validation rule."""
    return DraftFactory.create()


@pytest.fixture
def draft_array():
    """Two valid drafts, as held by the UI layer."""
    return DraftFactory.create_batch(2)


@pytest.fixture
def empty_draft():
    """A draft with nothing filled in."""
    return DraftFactory.create_empty()


# ===================
# UPSTREAM FIXTURES
# ===================

@pytest.fixture
def sample_product():
    """Catalog product with full attributes."""
    return ProductFactory.create()
