from flask import Blueprint, request, jsonify, current_app
from app.extensions import get_service
from app.services.errors import InvalidInput, InvalidVoteType, StorageFailure
from app.utils.decorators import json_body_required

votes_bp = Blueprint('votes', __name__)

@votes_bp.route('', methods=['GET'])
def list_votes():
    service = get_service('votes')
    keys = [request.args.get(k) for k in ('roomId', 'day', 'periodId')]

    if not any(keys):
        return jsonify(service.list_votes())
    if not all(keys):
        return jsonify({'error': 'roomId, day, and periodId must be given together.'}), 400

    return jsonify(service.get_bucket(*keys))

@votes_bp.route('', methods=['POST'])
@json_body_required
def record_vote(data):
    try:
        bucket = get_service('votes').record_vote(
            room_id=data.get('roomId'),
            vote_type=data.get('type'),
            day=data.get('day'),
            period_id=data.get('periodId')
        )
        return jsonify(bucket), 200
    except (InvalidInput, InvalidVoteType) as e:
        return jsonify({'error': str(e)}), 400
    except StorageFailure as e:
        current_app.logger.error(f"Failed to record vote: {e}")
        return jsonify({'error': 'Failed to save vote on server.'}), 500
