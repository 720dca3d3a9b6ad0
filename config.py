import os
from dotenv import load_dotenv

load_dotenv() # load variables from the .env file

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change-me-recruitment-secret')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    JWT_ACCESS_TOKEN_HOURS = int(os.getenv('JWT_ACCESS_TOKEN_HOURS', 3))

    DB_HOST = os.getenv('DB_HOST', 'localhost:3306')
    DB_USER = os.getenv('DB_USER', 'root')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME', 'hr_recruitment')

    # Build MySQL connection string (using PyMySQL driver) unless DATABASE_URL is given
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or (
        f"mysql+pymysql://{DB_USER}@{DB_HOST}/{DB_NAME}"
        if not DB_PASSWORD else
        f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}/{DB_NAME}"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', 'uploads')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB per request
    ALLOWED_UPLOAD_EXTENSIONS = {"pdf", "doc", "docx", "jpg", "jpeg", "png", "gif"}

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key-for-recruitment-suite'
    JWT_SECRET_KEY = 'test-jwt-secret-key-for-recruitment-suite'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    UPLOAD_FOLDER = os.path.join(os.getenv('TMPDIR', '/tmp'), 'recruitment-test-uploads')
    LOG_LEVEL = 'WARNING'
