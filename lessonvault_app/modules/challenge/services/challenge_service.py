from typing import Any, Dict, Optional

from flask import current_app

from lessonvault_app.core.error_handlers import PersistenceError
from lessonvault_app.core.storage import read_challenge, write_challenge
from lessonvault_app.utils.ids import mint_id
from lessonvault_app.utils.payloads import as_mapping


class ChallengeService:
    @staticmethod
    def get_challenge() -> Optional[Dict[str, Any]]:
        return read_challenge().get('challenge') or None

    @staticmethod
    def get_admin_document() -> Dict[str, Any]:
        # Same data as the public read; only the gate differs.
        return read_challenge()

    @staticmethod
    def save_challenge(payload: Any) -> Optional[Dict[str, Any]]:
        """
        Upsert the single challenge slot. A falsy payload clears it; otherwise
        the supplied id is kept (or a new one minted) and days default to [].
        """
        if payload:
            payload = as_mapping(payload)
            challenge = {
                'id': payload.get('id') or mint_id(),
                'title': payload.get('title'),
                'description': payload.get('description'),
                'duration': payload.get('duration'),
                'days': payload.get('days') or [],
            }
        else:
            challenge = None

        if not write_challenge({'challenge': challenge}):
            raise PersistenceError('Failed to save challenge')

        current_app.logger.info("Saved challenge %s", challenge['id'] if challenge else None)
        return challenge

    @staticmethod
    def delete_challenge() -> None:
        if not write_challenge({'challenge': None}):
            raise PersistenceError('Failed to delete challenge')
        current_app.logger.info("Cleared challenge")
