from flask import jsonify

from lessonvault_app.core.error_handlers import api_errors
from lessonvault_app.modules.admin.decorators import admin_required, json_body
from .. import challenge_admin_bp
from ..services.challenge_service import ChallengeService


@challenge_admin_bp.route('/challenge', methods=['POST'])
@admin_required
@api_errors('Failed to fetch challenge')
def admin_get_challenge():
    return jsonify(ChallengeService.get_admin_document())


@challenge_admin_bp.route('/challenge/save', methods=['POST'])
@admin_required
@api_errors('Failed to save challenge')
def save_challenge():
    """API: create or replace the challenge (null clears it)."""
    challenge = ChallengeService.save_challenge(json_body().get('challenge'))
    return jsonify({'success': True, 'challenge': challenge})


@challenge_admin_bp.route('/challenge/delete', methods=['POST'])
@admin_required
@api_errors('Failed to delete challenge')
def delete_challenge():
    ChallengeService.delete_challenge()
    return jsonify({'success': True})
