import logging

from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import ApprovedPuzzle
from .rotation import TRIGGER_APPROVAL, rotate_if_expired

logger = logging.getLogger(__name__)


def _fill_display_slot():
    try:
        rotate_if_expired(trigger=TRIGGER_APPROVAL)
    except Exception:
        # Never block moderation writes; the hourly check retries.
        logger.exception("Error in puzzle approval trigger")


@receiver(post_save, sender=ApprovedPuzzle)
def promote_if_display_empty(sender, instance, created, raw=False, **kwargs):
    if not created or raw:
        return
    logger.info("New puzzle approved (%s), checking display slot", instance.movie_name)
    transaction.on_commit(_fill_display_slot)
