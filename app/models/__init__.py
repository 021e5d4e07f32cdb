from app.models.room import Classroom
from app.models.comment import Comment
from app.models.period import Period, PeriodInfo
from app.models.vote import VOTE_TYPES, empty_bucket
