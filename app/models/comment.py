from dataclasses import dataclass
from typing import Optional

@dataclass
class Comment:
    id: int
    room_id: str
    text: str
    period_id: str
    day: str
    timestamp: str
    likes: Optional[int] = None

    def to_dict(self):
        data = {
            'id': self.id,
            'roomId': self.room_id,
            'text': self.text,
            'periodId': self.period_id,
            'day': self.day,
            'timestamp': self.timestamp
        }
        # Fresh comments carry no likes key until first liked
        if self.likes is not None:
            data['likes'] = self.likes
        return data
