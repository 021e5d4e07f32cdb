from app.models import Classroom
from app.services.errors import NotFound


class ClassroomService:
    """Read-only access to classrooms.json."""

    def __init__(self, document):
        self.document = document

    def list_classrooms(self):
        return [Classroom.from_dict(r) for r in self.document.load() if isinstance(r, dict)]

    def get_classroom(self, room_id):
        key = str(room_id).strip()
        for room in self.list_classrooms():
            if str(room.id) == key:
                return room
        raise NotFound("Classroom not found.")

    @staticmethod
    def filter_classrooms(classrooms, keyword=None, buildings=None, equipment=None, hide_occupied=False):
        """
        Apply the filter panel rules.
        Keyword matches the name case-insensitively, buildings is any-of,
        equipment requires every listed tag.
        """
        keyword = (keyword or '').strip().lower()
        results = []
        for room in classrooms:
            if keyword and keyword not in room.name.lower():
                continue
            if buildings and room.building not in buildings:
                continue
            if equipment:
                room_tags = set(room.tags)
                if not all(tag in room_tags for tag in equipment):
                    continue
            if hide_occupied and room.is_occupied:
                continue
            results.append(room)
        return results

    @staticmethod
    def group_by_building(classrooms):
        """Group rooms by building, buildings in order of first appearance."""
        grouped = {}
        for room in classrooms:
            grouped.setdefault(room.building, []).append(room)
        return [{'building': b, 'rooms': rooms} for b, rooms in grouped.items()]
