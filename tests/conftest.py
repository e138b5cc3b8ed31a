"""
Shared fixtures for the daily puzzle tests.

Provides factories for the three puzzle tables and a fixed IST clock.
Rows created through the factories do not fire the approval trigger:
pytest-django wraps each test in a transaction and on_commit callbacks are
discarded unless a test captures them explicitly.
"""

from datetime import datetime, timedelta, timezone

import pytest

from puzzles.models import ApprovedPuzzle, DisplayPuzzle

IST = timezone(timedelta(hours=5, minutes=30))


@pytest.fixture
def now():
    """Mid-afternoon IST on 10 March 2024."""
    return datetime(2024, 3, 10, 15, 0, tzinfo=IST)


@pytest.fixture
def make_approved(db):
    def _make(movie_name, created_at, **kwargs):
        kwargs.setdefault("submitted_by", "moderator")
        kwargs.setdefault("clues", [f"{movie_name} clue 1", f"{movie_name} clue 2"])
        kwargs.setdefault("approved_at", created_at + timedelta(hours=1))
        return ApprovedPuzzle.objects.create(movie_name=movie_name, created_at=created_at, **kwargs)
    return _make


@pytest.fixture
def make_display(db):
    def _make(movie_name, expiry_date, **kwargs):
        kwargs.setdefault("submitted_by", "someone")
        kwargs.setdefault("clues", ["old clue"])
        kwargs.setdefault("displayed_at", expiry_date - timedelta(days=1))
        kwargs.setdefault("source_id", 999)
        return DisplayPuzzle.objects.create(movie_name=movie_name, expiry_date=expiry_date, **kwargs)
    return _make
