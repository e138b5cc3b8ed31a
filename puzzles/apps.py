from django.apps import AppConfig


class PuzzlesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'puzzles'
    verbose_name = 'Daily puzzles'

    def ready(self):
        from . import signals  # noqa: F401
