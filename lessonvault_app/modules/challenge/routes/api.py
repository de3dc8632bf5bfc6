from flask import jsonify

from lessonvault_app.core.error_handlers import api_errors
from .. import challenge_bp
from ..services.challenge_service import ChallengeService


@challenge_bp.route('/challenge', methods=['GET'])
@api_errors('Failed to fetch challenge')
def get_challenge():
    """API: the active challenge, or null."""
    return jsonify({'challenge': ChallengeService.get_challenge()})
