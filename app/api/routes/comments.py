import math
from flask import Blueprint, request, jsonify, current_app
from app.extensions import get_service
from app.services.comment_service import CommentService
from app.services.errors import InvalidInput, NotFound, StorageFailure
from app.utils.decorators import json_body_required

comments_bp = Blueprint('comments', __name__)

def parse_comment_id(raw):
    """
    Numeric id from the URL. Decimal forms like "5.0" name comment 5;
    non-integral values parse but never match an id.
    """
    if '_' in raw:
        raise ValueError(raw)
    value = float(raw)
    if math.isnan(value):
        raise ValueError(raw)
    return int(value) if value.is_integer() else value

@comments_bp.route('', methods=['GET'])
def list_comments():
    comments = get_service('comments').list_comments()
    comments = CommentService.filter_comments(
        comments,
        room_id=request.args.get('roomId'),
        day=request.args.get('day'),
        period_id=request.args.get('periodId')
    )
    return jsonify(comments)

@comments_bp.route('', methods=['POST'])
@json_body_required
def post_comment(data):
    try:
        comment = get_service('comments').post_comment(
            room_id=data.get('roomId'),
            text=data.get('text'),
            period_id=data.get('periodId'),
            day=data.get('day'),
            timestamp=data.get('timestamp')
        )
        return jsonify(comment.to_dict()), 201
    except InvalidInput as e:
        return jsonify({'error': str(e)}), 400
    except StorageFailure as e:
        current_app.logger.error(f"Failed to write comment to file: {e}")
        return jsonify({'error': 'Failed to save comment on server.'}), 500

@comments_bp.route('/<comment_id>/like', methods=['POST'])
def like_comment(comment_id):
    try:
        comment_id = parse_comment_id(comment_id)
    except ValueError:
        return jsonify({'error': 'Invalid comment ID.'}), 400

    try:
        result = get_service('comments').like_comment(comment_id)
        return jsonify(result), 200
    except NotFound as e:
        return jsonify({'error': str(e)}), 404
    except StorageFailure as e:
        current_app.logger.error(f"Failed to process like request: {e}")
        return jsonify({'error': 'Failed to update like count.'}), 500
