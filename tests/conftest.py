"""Shared test fixtures for twig tests.

Modified: 2026-10-18
"""

import pytest

from twig.core.models import Branch
from twig.core.session import BranchSession
from tests.utils import FakeBranchRepository


@pytest.fixture
def sample_branches():
    """The two-branch list from ``main|abc123|*`` / ``feature|def456|``."""
    return [
        Branch(name="main", short_revision="abc123", is_current=True),
        Branch(name="feature", short_revision="def456", is_current=False),
    ]


@pytest.fixture
def three_branches():
    """Current branch in the middle of the list."""
    return [
        Branch(name="feature/login", short_revision="1a2b3c4"),
        Branch(name="main", short_revision="5d6e7f8", is_current=True),
        Branch(name="bugfix/typo", short_revision="9a0b1c2"),
    ]


@pytest.fixture
def fake_repository(sample_branches):
    """In-memory repository seeded with sample_branches."""
    return FakeBranchRepository(sample_branches)


@pytest.fixture
def session(fake_repository):
    """Session over fake_repository's initial list."""
    return BranchSession(fake_repository, fake_repository.load_branches())
