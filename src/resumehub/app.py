# src/resumehub/app.py
import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from .config import Config
from .db import MongoStore
from .errors import register_error_handlers
from .routes import EXTENSION_KEY
from .routes.admin_routes import admin_bp
from .routes.resume_routes import resumes_bp
from .routes.user_routes import users_bp
from .services.password_service import PasswordHasher
from .services.user_service import ensure_admin_bootstrap

logger = logging.getLogger(__name__)


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(threadName)s - %(message)s')
    logging.getLogger('pymongo').setLevel(logging.WARNING)
    logging.getLogger('pymongo.server_monitoring').setLevel(logging.WARNING)


def create_app(store: MongoStore, hasher: Optional[PasswordHasher] = None, config: Optional[dict] = None) -> Flask:
    """Builds the Flask app around an already connected store."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    CORS(app)

    if hasher is None:
        hasher = PasswordHasher(rounds=app.config["BCRYPT_ROUNDS"])
    app.extensions[EXTENSION_KEY] = {"store": store, "hasher": hasher}

    register_error_handlers(app)
    app.register_blueprint(users_bp)
    app.register_blueprint(resumes_bp)
    app.register_blueprint(admin_bp)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "Backend is running!"}), 200

    return app


def main() -> None:
    configure_logging()
    with MongoStore.connect(Config.MONGO_URI, Config.DB_NAME) as store:
        app = create_app(store)
        if app.config["BOOTSTRAP_ADMIN"]:
            ensure_admin_bootstrap(store, app.extensions[EXTENSION_KEY]["hasher"])
        logger.info("Starting Flask server on http://%s:%s ...", Config.HOST, Config.PORT)
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, use_reloader=False)


if __name__ == "__main__":
    main()
