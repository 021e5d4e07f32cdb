from flask import Flask
from app.config import DevelopmentConfig
from app.extensions import init_stores

def create_app(config_class=DevelopmentConfig):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False

    # Initialize extensions
    init_stores(app)

    # Register Blueprints
    from app.api.routes.classrooms import classrooms_bp
    from app.api.routes.votes import votes_bp
    from app.api.routes.comments import comments_bp
    from app.api.routes.periods import periods_bp

    app.register_blueprint(classrooms_bp, url_prefix='/api/classrooms')
    app.register_blueprint(votes_bp, url_prefix='/api/votes')
    app.register_blueprint(comments_bp, url_prefix='/api/comments')
    app.register_blueprint(periods_bp, url_prefix='/api/periods')

    @app.route('/health')
    def health():
        return {"status": "ok", "app": "ClassroomCrowd"}

    return app
