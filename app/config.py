import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '.env'))

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-prod'
    DATA_DIR = os.environ.get('DATA_DIR') or os.path.join(BASE_DIR, 'data')

    # Period table is evaluated in school-local time
    SCHOOL_TIMEZONE = os.environ.get('SCHOOL_TIMEZONE') or 'Asia/Tokyo'

    CLASSROOMS_FILE = 'classrooms.json'
    VOTES_FILE = 'votes.json'
    COMMENTS_FILE = 'comments.json'

class DevelopmentConfig(Config):
    DEBUG = True

class TestingConfig(Config):
    TESTING = True

class ProductionConfig(Config):
    DEBUG = False
    # In prod, rely on env vars strictly
