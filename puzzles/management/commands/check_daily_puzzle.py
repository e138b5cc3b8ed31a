import logging

from django.core.management.base import BaseCommand, CommandError

from puzzles.rotation import NOT_EXPIRED, TRIGGER_HOURLY, rotate_if_expired

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Rotate the display puzzle only if it is missing or expired. Run hourly as a backup."

    def handle(self, *args, **options):
        logger.info("Checking if puzzle rotation is needed")
        try:
            result = rotate_if_expired(trigger=TRIGGER_HOURLY)
        except Exception as e:
            raise CommandError(f"Puzzle expiry check failed: {e}") from e

        if result.rotated:
            self.stdout.write(self.style.SUCCESS(f"Rotated to {result.puzzle.movie_name!r}"))
        elif result.reason == NOT_EXPIRED:
            self.stdout.write("Current puzzle is still valid")
        else:
            self.stdout.write(self.style.WARNING(f"No rotation: {result.reason}"))
