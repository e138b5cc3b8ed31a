"""Daily puzzle rotation.

One shared workflow promotes the oldest approved puzzle into the display
slot and archives whatever was shown before. Every trigger (daily command,
hourly check, approval signal, manual endpoint) goes through rotate_puzzle().

The display day is a calendar day in a fixed UTC offset (IST, +05:30 by
default), not an IANA zone.
"""
import logging
from dataclasses import dataclass
from datetime import datetime as dt_datetime, timedelta, timezone as dt_timezone
from typing import NamedTuple, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from .models import CURRENT_KEY, ApprovedPuzzle, DisplayPuzzle, HistoryPuzzle

logger = logging.getLogger(__name__)

TRIGGER_DAILY = 'daily'
TRIGGER_HOURLY = 'hourly'
TRIGGER_APPROVAL = 'approval'
TRIGGER_MANUAL = 'manual'

NO_APPROVED_PUZZLES = 'no_approved_puzzles'
NOT_EXPIRED = 'not_expired'
CONCURRENT_ROTATION = 'concurrent_rotation'


class DayBounds(NamedTuple):
    start: dt_datetime
    end: dt_datetime


class ExpiryStatus(NamedTuple):
    expired: bool
    puzzle: Optional[DisplayPuzzle]


@dataclass
class RotationResult:
    trigger: str
    success: bool
    rotated: bool = False
    reason: Optional[str] = None
    puzzle: Optional[DisplayPuzzle] = None
    archived: Optional[HistoryPuzzle] = None


class ConcurrentRotation(Exception):
    """Another invocation filled the empty display slot first."""


def display_timezone():
    return dt_timezone(timedelta(minutes=settings.PUZZLE_UTC_OFFSET_MINUTES))


def day_bounds(now=None, tz=None) -> DayBounds:
    """Start (00:00:00.000) and end (23:59:59.999) of now's day in the display offset."""
    now = now or timezone.now()
    if timezone.is_naive(now):
        raise ValueError('day_bounds() needs an aware datetime')
    local = now.astimezone(tz or display_timezone())
    start = local.replace(hour=0, minute=0, second=0, microsecond=0)
    end = local.replace(hour=23, minute=59, second=59, microsecond=999000)
    return DayBounds(start, end)


def is_expired(display, now=None) -> bool:
    """True when there is no display puzzle, no expiry, or now is past the expiry."""
    if display is None or display.expiry_date is None:
        return True
    now = now or timezone.now()
    return now > display.expiry_date


def check_expiry(now=None) -> ExpiryStatus:
    display = DisplayPuzzle.current()
    return ExpiryStatus(is_expired(display, now), display)


def rotate_puzzle(*, trigger=TRIGGER_MANUAL, now=None, only_if_expired=False) -> RotationResult:
    """Archive the display puzzle and promote the oldest approved puzzle.

    Runs as one transaction holding a lock on the display row. With
    only_if_expired the expiry check is repeated under that lock, so a
    conditional trigger racing another rotation becomes a no-op.

    With an empty queue the display puzzle is still archived and its row is
    removed, so the slot stays empty (GET /puzzle/current returns no puzzle)
    until the next approval instead of showing the stale puzzle.

    Database errors are logged and re-raised; nothing is left half-written.
    """
    now = now or timezone.now()
    logger.info("Starting puzzle rotation (trigger=%s)", trigger)
    try:
        with transaction.atomic():
            result = _rotate(trigger, now, only_if_expired)
    except ConcurrentRotation:
        logger.warning("Display slot was filled by a concurrent rotation (trigger=%s), skipping", trigger)
        return RotationResult(trigger, success=False, reason=CONCURRENT_ROTATION)
    except Exception:
        logger.exception("Error in puzzle rotation (trigger=%s)", trigger)
        raise

    if result.rotated:
        logger.info(
            "Rotation completed (trigger=%s): now showing %r until %s",
            trigger, result.puzzle.movie_name, result.puzzle.expiry_date.isoformat(),
        )
    elif result.reason == NO_APPROVED_PUZZLES:
        logger.info("No approved puzzles available for rotation (trigger=%s)", trigger)
    else:
        logger.info("Rotation skipped (trigger=%s): %s", trigger, result.reason)
    return result


def _rotate(trigger, now, only_if_expired):
    current = DisplayPuzzle.objects.select_for_update().filter(pk=CURRENT_KEY).first()
    if only_if_expired and not is_expired(current, now):
        return RotationResult(trigger, success=True, reason=NOT_EXPIRED, puzzle=current)

    archived = None
    if current is not None:
        archived = HistoryPuzzle.objects.create(moved_to_history_at=now, **current.display_fields())
        logger.info("Moved puzzle to history: %s", current.movie_name)
    else:
        logger.info("No current display puzzle found")

    upcoming = ApprovedPuzzle.objects.select_for_update().order_by('created_at', 'id').first()
    if upcoming is None:
        if current is not None:
            # Already archived; leave the slot empty until something is approved.
            current.delete()
        return RotationResult(trigger, success=False, reason=NO_APPROVED_PUZZLES, archived=archived)

    logger.info("Next puzzle selected: %s", upcoming.movie_name)
    display = DisplayPuzzle(
        key=CURRENT_KEY,
        displayed_at=now,
        expiry_date=day_bounds(now).end,
        source_id=upcoming.pk,
        **upcoming.puzzle_fields(),
    )
    if current is None:
        try:
            with transaction.atomic():
                display.save(force_insert=True)
        except IntegrityError as exc:
            raise ConcurrentRotation() from exc
    else:
        display.save(force_update=True)

    upcoming.delete()
    return RotationResult(trigger, success=True, rotated=True, puzzle=display, archived=archived)


def rotate_if_expired(*, trigger, now=None) -> RotationResult:
    """Rotate only when the display slot is empty or stale."""
    now = now or timezone.now()
    status = check_expiry(now)
    if not status.expired:
        logger.info("Current puzzle is still valid, no rotation needed (trigger=%s)", trigger)
        return RotationResult(trigger, success=True, reason=NOT_EXPIRED, puzzle=status.puzzle)

    if status.puzzle is None:
        logger.info("No display puzzle found, triggering rotation (trigger=%s)", trigger)
    else:
        logger.info("Display puzzle has expired, triggering rotation (trigger=%s)", trigger)
    return rotate_puzzle(trigger=trigger, now=now, only_if_expired=True)
