# File: lessonvault_app/core/storage.py
# Infrastructure Layer: whole-document JSON persistence

"""Document stores for the two LessonVault JSON documents.

Each store persists one document and always replaces it whole; there is no
locking, so concurrent writers race and the last write wins. Reads never
raise: a missing or unreadable document yields a copy of its empty default.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict

from flask import Flask, current_app

logger = logging.getLogger(__name__)

STORAGE_EXTENSION_KEY = "lessonvault_storage"

COURSES_DEFAULT: Dict[str, Any] = {"courses": []}
CHALLENGE_DEFAULT: Dict[str, Any] = {"challenge": None}


class DocumentStore:
    """Load/save interface for a single JSON document."""

    def __init__(self, name: str, default: Dict[str, Any]):
        self.name = name
        self.default = default

    def empty(self) -> Dict[str, Any]:
        return copy.deepcopy(self.default)

    def ensure_exists(self) -> None:
        """Create the document with its empty default if it is missing."""

    def load(self) -> Dict[str, Any]:
        raise NotImplementedError

    def save(self, data: Dict[str, Any]) -> bool:
        raise NotImplementedError


class JsonFileStore(DocumentStore):
    """Stores a document as pretty-printed JSON in a file."""

    def __init__(self, name: str, path: str, default: Dict[str, Any]):
        super().__init__(name, default)
        self.path = path

    def ensure_exists(self) -> None:
        if os.path.exists(self.path):
            return
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        if self.save(self.empty()):
            logger.info("Created %s document at %s", self.name, self.path)

    def load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, ValueError) as exc:
            logger.error("Error reading %s from %s: %s", self.name, self.path, exc)
            return self.empty()

    def save(self, data: Dict[str, Any]) -> bool:
        try:
            # Serialize before opening so a bad document never truncates the file.
            text = json.dumps(data, indent=2)
            with open(self.path, "w", encoding="utf-8") as handle:
                handle.write(text)
            return True
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error writing %s to %s: %s", self.name, self.path, exc)
            return False


class MemoryStore(DocumentStore):
    """Keeps a document in process memory."""

    def __init__(self, name: str, default: Dict[str, Any]):
        super().__init__(name, default)
        self._data = self.empty()

    def load(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self, data: Dict[str, Any]) -> bool:
        try:
            # Round-trip through JSON so what is kept matches what a file would hold.
            self._data = json.loads(json.dumps(data))
            return True
        except (TypeError, ValueError) as exc:
            logger.error("Error writing %s to memory: %s", self.name, exc)
            return False


@dataclass
class Storage:
    """The pair of documents backing the application."""

    courses: DocumentStore
    challenge: DocumentStore

    def ensure_exists(self) -> None:
        self.courses.ensure_exists()
        self.challenge.ensure_exists()


def build_storage(config) -> Storage:
    """Create the storage backend named by ``STORAGE_BACKEND``."""

    backend = config.get("STORAGE_BACKEND", "json")
    if backend == "memory":
        return Storage(
            courses=MemoryStore("courses", COURSES_DEFAULT),
            challenge=MemoryStore("challenge", CHALLENGE_DEFAULT),
        )
    if backend == "json":
        data_dir = config["DATA_DIR"]
        return Storage(
            courses=JsonFileStore(
                "courses",
                os.path.join(data_dir, config.get("COURSES_FILENAME", "courses.json")),
                COURSES_DEFAULT,
            ),
            challenge=JsonFileStore(
                "challenge",
                os.path.join(data_dir, config.get("CHALLENGES_FILENAME", "challenges.json")),
                CHALLENGE_DEFAULT,
            ),
        )
    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}")


def init_storage(app: Flask, storage: Storage | None = None) -> Storage:
    """Attach storage to the app and create missing documents."""

    storage = storage or build_storage(app.config)
    storage.ensure_exists()
    app.extensions[STORAGE_EXTENSION_KEY] = storage
    return storage


def get_storage() -> Storage:
    return current_app.extensions[STORAGE_EXTENSION_KEY]


def read_courses() -> Dict[str, Any]:
    return get_storage().courses.load()


def write_courses(data: Dict[str, Any]) -> bool:
    return get_storage().courses.save(data)


def read_challenge() -> Dict[str, Any]:
    return get_storage().challenge.load()


def write_challenge(data: Dict[str, Any]) -> bool:
    return get_storage().challenge.save(data)
