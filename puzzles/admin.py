from django.contrib import admin, messages
from django.shortcuts import redirect
from django.urls import path

from .models import ApprovedPuzzle, DisplayPuzzle, HistoryPuzzle
from .rotation import TRIGGER_MANUAL, rotate_puzzle


@admin.register(ApprovedPuzzle)
class ApprovedPuzzleAdmin(admin.ModelAdmin):
    list_display = ("movie_name", "submitted_by", "created_at", "approved_at")
    search_fields = ("movie_name", "submitted_by")
    ordering = ("created_at", "id")


@admin.register(DisplayPuzzle)
class DisplayPuzzleAdmin(admin.ModelAdmin):
    # Read-only: the display slot is written by the rotation workflow only.
    list_display = ("movie_name", "submitted_by", "displayed_at", "expiry_date", "source_id")

    change_list_template = "admin/puzzles/displaypuzzle_changelist.html"

    def get_urls(self):
        urls = super().get_urls()
        custom = [
            path("rotate/", self.admin_site.admin_view(self.rotate_view), name="puzzles_displaypuzzle_rotate"),
        ]
        return custom + urls

    def rotate_view(self, request):
        """Archive the display puzzle and promote the oldest approved one (FIFO)."""
        if request.method == 'POST':
            try:
                result = rotate_puzzle(trigger=TRIGGER_MANUAL)
            except Exception as e:
                messages.error(request, f"Rotation failed: {e}")
            else:
                if result.rotated:
                    messages.success(request, f"Promoted oldest approved puzzle: {result.puzzle.movie_name}.")
                else:
                    messages.warning(request, f"No rotation: {result.reason}")
        return redirect("admin:puzzles_displaypuzzle_changelist")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(HistoryPuzzle)
class HistoryPuzzleAdmin(admin.ModelAdmin):
    list_display = ("movie_name", "submitted_by", "displayed_at", "moved_to_history_at")
    list_filter = ("moved_to_history_at",)
    search_fields = ("movie_name", "submitted_by")

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
