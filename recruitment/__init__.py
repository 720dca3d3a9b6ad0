import logging

from flask import Flask, send_from_directory
from pydantic import ValidationError
from pymysql import connect
from sqlalchemy.engine import make_url
from werkzeug.exceptions import HTTPException

from config import Config
from .extensions import *
from .models import *
from .errors import RecruitmentError
from .utils import response
from .routes.auth_routes import auth_bp
from .routes.job_routes import jobs_bp
from .routes.candidate_routes import candidates_bp
from .routes.interview_routes import interviews_bp
from .routes.offer_routes import offers_bp
from .routes.public_routes import public_bp
from .database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)

API_PREFIX = "/api/recruitment"


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Allow CORS from the React client
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(public_bp, url_prefix=API_PREFIX)
    app.register_blueprint(jobs_bp, url_prefix=API_PREFIX)
    app.register_blueprint(candidates_bp, url_prefix=API_PREFIX)
    app.register_blueprint(interviews_bp, url_prefix=API_PREFIX)
    app.register_blueprint(offers_bp, url_prefix=API_PREFIX)

    register_error_handlers(app)
    register_jwt_handlers()

    @app.route("/uploads/<path:filename>", methods=["GET"])
    def uploaded_file(filename):
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename)

    @app.route("/api/health", methods=["GET"])
    def health():
        return {"status": "success", "message": "Recruitment API is up"}, 200

    app.cli.add_command(seed_all)

    return app


def register_error_handlers(app):
    """Every failure leaves as ``{"success": false, "message", "code"}``."""

    @app.errorhandler(RecruitmentError)
    def handle_recruitment_error(e):
        logger.warning(f"{e.code}: {e.message}")
        return response.error(e.message, e.status_code, e.code)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        logger.warning(f"VALIDATION_ERROR: {errors}")
        return response.error("Validation failed", 400, "VALIDATION_ERROR", errors=errors)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if e.code >= 500:
            logger.error(f"HTTP {e.code}: {e.description}")
        else:
            logger.warning(f"HTTP {e.code}: {e.description}")
        return response.error(e.description or e.name, e.code, e.name.upper().replace(" ", "_"))

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        # storage errors and bugs are logged in full but never echoed to clients
        logger.exception(f"❌ Unhandled error: {e}")
        return response.error("Internal server error", 500, "INTERNAL_ERROR")


def register_jwt_handlers():
    @jwt.unauthorized_loader
    def missing_token(reason):
        return response.error(reason, 401, "UNAUTHORIZED")

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return response.error(reason, 401, "INVALID_TOKEN")

    @jwt.expired_token_loader
    def expired_token(_header, _payload):
        return response.error("Token has expired", 401, "TOKEN_EXPIRED")


def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)
    if not url.drivername.startswith("mysql"):
        return

    host = url.host or "localhost"
    port = url.port or 3306

    logger.info(f"🔧 Ensuring database '{url.database}' exists on {host}:{port} as '{url.username}'")

    conn = connect(
        host=host,
        port=port,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
