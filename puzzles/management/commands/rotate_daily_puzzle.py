import logging

from django.core.management.base import BaseCommand, CommandError

from puzzles.rotation import TRIGGER_DAILY, rotate_puzzle

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Archive the display puzzle and promote the oldest approved one. Run daily at 00:00 IST."

    def handle(self, *args, **options):
        logger.info("Starting daily puzzle rotation at midnight IST")
        try:
            result = rotate_puzzle(trigger=TRIGGER_DAILY)
        except Exception as e:
            raise CommandError(f"Daily puzzle rotation failed: {e}") from e

        if result.rotated:
            self.stdout.write(self.style.SUCCESS(f"Rotated to {result.puzzle.movie_name!r}"))
        else:
            self.stdout.write(self.style.WARNING(f"No rotation: {result.reason}"))
