from flask import current_app
from app.services.storage import JsonDocument
from app.services.classroom_service import ClassroomService
from app.services.vote_service import VoteService
from app.services.comment_service import CommentService


def init_stores(app):
    """Build one set of stores per application, keyed under app.extensions."""
    data_dir = app.config['DATA_DIR']

    classrooms_doc = JsonDocument(data_dir, app.config['CLASSROOMS_FILE'], default=list)
    votes_doc = JsonDocument(data_dir, app.config['VOTES_FILE'], default=dict)
    comments_doc = JsonDocument(data_dir, app.config['COMMENTS_FILE'], default=list)

    app.extensions['classrooms'] = ClassroomService(classrooms_doc)
    app.extensions['votes'] = VoteService(votes_doc)
    app.extensions['comments'] = CommentService(comments_doc)


def get_service(name):
    return current_app.extensions[name]
