"""Blueprint registration for the LessonVault API.

Each entry in ``DEFAULT_MODULES`` names a module, the blueprint attribute it
exposes and the URL prefix it is mounted under.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    import_path: str
    attribute: str
    url_prefix: Optional[str] = None

    def load_blueprint(self) -> Blueprint:
        blueprint = getattr(import_string(self.import_path), self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                f"{self.import_path}.{self.attribute} is not a Flask Blueprint (got {type(blueprint)!r})"
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    for module in modules:
        app.register_blueprint(module.load_blueprint(), url_prefix=module.url_prefix)
        app.logger.debug("Mounted %s.%s at %s", module.import_path, module.attribute, module.url_prefix or "/")


def register_default_modules(app: Flask) -> None:
    """Mount the admin, courses and challenge APIs."""

    register_modules(app, DEFAULT_MODULES)


# Public reads live under /api, password-gated operations under /api/admin.
DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("lessonvault_app.modules.admin", "admin_bp", url_prefix="/api/admin"),
    ModuleDefinition("lessonvault_app.modules.courses", "courses_bp", url_prefix="/api"),
    ModuleDefinition("lessonvault_app.modules.courses", "courses_admin_bp", url_prefix="/api/admin"),
    ModuleDefinition("lessonvault_app.modules.challenge", "challenge_bp", url_prefix="/api"),
    ModuleDefinition("lessonvault_app.modules.challenge", "challenge_admin_bp", url_prefix="/api/admin"),
)
