from flask import Blueprint, request, jsonify
from app.extensions import get_service
from app.services.classroom_service import ClassroomService
from app.services.errors import NotFound
from app.utils.decorators import query_flag

classrooms_bp = Blueprint('classrooms', __name__)

def _filtered_classrooms():
    service = get_service('classrooms')
    return ClassroomService.filter_classrooms(
        service.list_classrooms(),
        keyword=request.args.get('keyword'),
        buildings=request.args.getlist('building'),
        equipment=request.args.getlist('tag'),
        hide_occupied=query_flag('hideOccupied')
    )

@classrooms_bp.route('', methods=['GET'])
def list_classrooms():
    return jsonify([r.to_dict() for r in _filtered_classrooms()])

@classrooms_bp.route('/buildings', methods=['GET'])
def list_buildings():
    groups = ClassroomService.group_by_building(_filtered_classrooms())
    return jsonify([
        {'building': g['building'], 'rooms': [r.to_dict() for r in g['rooms']]}
        for g in groups
    ])

@classrooms_bp.route('/<room_id>', methods=['GET'])
def get_classroom(room_id):
    try:
        room = get_service('classrooms').get_classroom(room_id)
    except NotFound:
        return jsonify({'error': 'Not found'}), 404
    return jsonify(room.to_dict())
