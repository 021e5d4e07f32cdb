from dataclasses import dataclass, field
from typing import Optional

STATUS_FREE = '空き'
STATUS_OCCUPIED = '授業中'

@dataclass
class Classroom:
    id: int
    name: str
    building: str
    status: str = STATUS_FREE
    capacity: Optional[int] = None
    tags: list = field(default_factory=list)
    photo: Optional[str] = None

    @property
    def is_occupied(self):
        return self.status == STATUS_OCCUPIED

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            building=data.get('building', ''),
            status=data.get('status', STATUS_FREE),
            capacity=data.get('capacity'),
            tags=list(data.get('tags') or []),
            photo=data.get('photo')
        )

    def to_dict(self):
        data = {
            'id': self.id,
            'name': self.name,
            'building': self.building,
            'capacity': self.capacity,
            'status': self.status,
            'tags': self.tags
        }
        if self.photo:
            data['photo'] = self.photo
        return data
