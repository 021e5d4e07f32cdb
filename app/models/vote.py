VOTE_TYPES = ('class', 'free', 'garagara', 'sukuname', 'hutsu', 'konzatsu')


def empty_bucket():
    """All six vote counters at zero."""
    return {vote_type: 0 for vote_type in VOTE_TYPES}
