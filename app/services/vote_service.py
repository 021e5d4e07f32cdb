from app.models import VOTE_TYPES, empty_bucket
from app.services.errors import InvalidInput, InvalidVoteType


def _level(parent, key):
    """Child mapping under `key`; anything that is not a dict counts as absent."""
    child = parent.get(key)
    if not isinstance(child, dict):
        child = {}
        parent[key] = child
    return child


class VoteService:
    """Vote tallies in votes.json, nested room -> weekday -> period -> bucket."""

    def __init__(self, document):
        self.document = document

    def list_votes(self):
        return self.document.load()

    def get_bucket(self, room_id, day, period_id):
        """Tally for one key; unseen or malformed keys read as all zeros and are not stored."""
        node = self.document.load()
        for key in (str(room_id), str(day), str(period_id)):
            node = node.get(key) if isinstance(node, dict) else None
        return dict(node) if isinstance(node, dict) and node else empty_bucket()

    def record_vote(self, room_id, vote_type, day, period_id):
        """
        Increment one counter and return the bucket after the increment.
        Missing or malformed room/day/period levels are replaced on the way down.
        """
        if not room_id or not vote_type or not day or not period_id:
            raise InvalidInput("roomId, type, day, and periodId are required.")

        if vote_type not in VOTE_TYPES:
            raise InvalidVoteType("Invalid vote type.")

        votes = self.document.load()

        day_votes = _level(_level(votes, str(room_id)), str(day))
        if not isinstance(day_votes.get(str(period_id)), dict) or not day_votes[str(period_id)]:
            day_votes[str(period_id)] = empty_bucket()

        bucket = day_votes[str(period_id)]
        count = bucket.get(vote_type)
        bucket[vote_type] = (count if isinstance(count, int) else 0) + 1

        self.document.save(votes)
        return bucket
