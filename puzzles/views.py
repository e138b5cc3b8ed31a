import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from .models import HistoryPuzzle
from .rotation import TRIGGER_MANUAL, check_expiry, rotate_puzzle

logger = logging.getLogger(__name__)

HISTORY_DEFAULT_LIMIT = 20
HISTORY_MAX_LIMIT = 100


@require_GET
def puzzle_current(request):
    expired, puzzle = check_expiry()
    return JsonResponse({
        'expired': expired,
        'puzzle': puzzle.to_dict() if puzzle else None,
    })


@require_GET
def puzzle_history(request):
    try:
        limit = int(request.GET.get('limit', HISTORY_DEFAULT_LIMIT))
    except (TypeError, ValueError):
        limit = HISTORY_DEFAULT_LIMIT
    limit = max(1, min(limit, HISTORY_MAX_LIMIT))
    items = [p.to_dict() for p in HistoryPuzzle.objects.all()[:limit]]
    return JsonResponse({'items': items})


@require_POST
def puzzle_rotate(request):
    """Manual rotation for signed-in users; mirrors the scheduled rotation.

    An empty queue is not an error but still answers success=False with
    reason "no_approved_puzzles", the shape the puzzle client checks for.
    """
    if not request.user.is_authenticated:
        return JsonResponse(
            {'success': False, 'error': 'unauthenticated', 'message': 'Must be authenticated to rotate puzzles'},
            status=401,
        )

    logger.info("Manual rotation triggered by: %s", request.user.get_username())
    try:
        result = rotate_puzzle(trigger=TRIGGER_MANUAL)
    except Exception as e:
        return JsonResponse({'success': False, 'error': 'internal', 'message': str(e)}, status=500)

    if result.rotated:
        return JsonResponse({
            'success': True,
            'message': 'Puzzle rotated successfully',
            'puzzle': result.puzzle.to_dict(),
        })
    return JsonResponse({'success': False, 'reason': result.reason})
