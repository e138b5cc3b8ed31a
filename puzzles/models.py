from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

CURRENT_KEY = 'current'


def validate_clues(value):
    """Clues must be a list of non-empty strings."""
    if not isinstance(value, list):
        raise ValidationError('Clues must be a list of strings.')
    for clue in value:
        if not isinstance(clue, str) or not clue.strip():
            raise ValidationError('Each clue must be a non-empty string.')


def _iso(value):
    return value.isoformat() if value else None


class PuzzleFields(models.Model):
    """Fields a puzzle carries through the pending -> displayed -> archived pipeline."""
    movie_name = models.CharField(max_length=200)
    submitted_by = models.CharField(max_length=150, blank=True)
    clues = models.JSONField(default=list, validators=[validate_clues], help_text="Ordered list of clue strings")
    created_at = models.DateTimeField(default=timezone.now)
    approved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        abstract = True

    def puzzle_fields(self):
        return {
            'movie_name': self.movie_name,
            'submitted_by': self.submitted_by,
            'clues': list(self.clues or []),
            'created_at': self.created_at,
            'approved_at': self.approved_at,
        }

    def to_dict(self):
        data = self.puzzle_fields()
        data['created_at'] = _iso(self.created_at)
        data['approved_at'] = _iso(self.approved_at)
        return data

    def __str__(self):
        return self.movie_name


# ---------------- Pending queue ----------------
class ApprovedPuzzle(PuzzleFields):
    # created_at is the FIFO key; rows are removed only when promoted.

    class Meta:
        ordering = ['created_at', 'id']
        indexes = [models.Index(fields=['created_at', 'id'], name='approved_fifo_idx')]

    def to_dict(self):
        data = super().to_dict()
        data['id'] = self.pk
        return data


# ---------------- Display slot ----------------
class DisplayPuzzle(PuzzleFields):
    key = models.CharField(max_length=16, primary_key=True, default=CURRENT_KEY, editable=False)
    displayed_at = models.DateTimeField(default=timezone.now)
    expiry_date = models.DateTimeField(null=True, blank=True)
    source_id = models.BigIntegerField(null=True, blank=True, help_text="ApprovedPuzzle this was promoted from")

    @classmethod
    def current(cls):
        return cls.objects.filter(pk=CURRENT_KEY).first()

    def display_fields(self):
        data = self.puzzle_fields()
        data.update(
            displayed_at=self.displayed_at,
            expiry_date=self.expiry_date,
            source_id=self.source_id,
        )
        return data

    def to_dict(self):
        data = super().to_dict()
        data.update(
            displayed_at=_iso(self.displayed_at),
            expiry_date=_iso(self.expiry_date),
            source_id=self.source_id,
        )
        return data


# ---------------- History log ----------------
class HistoryPuzzle(PuzzleFields):
    displayed_at = models.DateTimeField(null=True, blank=True)
    expiry_date = models.DateTimeField(null=True, blank=True)
    source_id = models.BigIntegerField(null=True, blank=True)
    moved_to_history_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-moved_to_history_at', '-id']
        verbose_name_plural = 'history puzzles'

    def to_dict(self):
        data = super().to_dict()
        data.update(
            id=self.pk,
            displayed_at=_iso(self.displayed_at),
            expiry_date=_iso(self.expiry_date),
            source_id=self.source_id,
            moved_to_history_at=_iso(self.moved_to_history_at),
        )
        return data
