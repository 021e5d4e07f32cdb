from datetime import datetime
import pytz
from app.models import Comment
from app.services.errors import InvalidInput, NotFound


def _utc_now():
    return datetime.now(pytz.utc)


class CommentService:
    """Comments in comments.json, a flat list appended to on each post."""

    def __init__(self, document, clock=_utc_now):
        self.document = document
        self.clock = clock
        self._last_id = 0

    def list_comments(self):
        return self.document.load()

    @staticmethod
    def filter_comments(comments, room_id=None, day=None, period_id=None):
        """Keep comments matching every given key, compared as strings."""
        results = []
        for c in comments:
            if not isinstance(c, dict):
                continue
            if room_id and str(c.get('roomId')) != str(room_id):
                continue
            if day and str(c.get('day')) != str(day):
                continue
            if period_id and str(c.get('periodId')) != str(period_id):
                continue
            results.append(c)
        return results

    def _next_id(self, now, comments):
        """Millisecond timestamp, bumped past any id already issued."""
        candidate = int(now.timestamp() * 1000)
        existing = [c.get('id') for c in comments if isinstance(c, dict) and isinstance(c.get('id'), int)]
        floor = max([self._last_id] + existing)
        if candidate <= floor:
            candidate = floor + 1
        self._last_id = candidate
        return candidate

    def post_comment(self, room_id, text, period_id, day, timestamp=None):
        if not room_id or not text or not period_id or not day:
            raise InvalidInput("roomId, text, periodId, and day are required.")

        now = self.clock()
        comments = self.document.load()

        comment = Comment(
            id=self._next_id(now, comments),
            room_id=str(room_id),
            text=text,
            period_id=str(period_id),
            day=str(day),
            timestamp=timestamp or now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
        )
        comments.append(comment.to_dict())

        self.document.save(comments)
        return comment

    def like_comment(self, comment_id):
        """Add one like, no per-user dedup. Returns {id, likes}."""
        comments = self.document.load()

        target = next((c for c in comments if isinstance(c, dict) and c.get('id') == comment_id), None)
        if target is None:
            raise NotFound("Comment not found.")

        target['likes'] = (target.get('likes') or 0) + 1

        self.document.save(comments)
        return {'id': target['id'], 'likes': target['likes']}
