"""Feature modules (blueprints) of the LessonVault app."""
