from django.contrib import admin
from django.urls import path
from puzzles.views import puzzle_current, puzzle_history, puzzle_rotate

urlpatterns = [
    path('admin/', admin.site.urls),
    # Daily puzzle endpoints
    path('puzzle/current', puzzle_current, name='puzzle_current'),
    path('puzzle/history', puzzle_history, name='puzzle_history'),
    path('puzzle/rotate', puzzle_rotate, name='puzzle_rotate'),
]
