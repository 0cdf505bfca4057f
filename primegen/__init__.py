# primegen/__init__.py
from flask import Flask
from .primes import primes_bp
from .health import health_bp
from .config import Config
import logging


def _configure_logging(level: str, debug: bool):
    logging.basicConfig()
    logger = logging.getLogger(__name__)
    try:
        logger.setLevel(level)
    except ValueError:
        logging.warning("LOG_LEVEL inválido %r, usando INFO", level)
        logger.setLevel(logging.INFO)
    # werkzeug loga cada requisição; só interessa em modo debug
    if not debug:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)


def create_app(config_object: object | None = None):
    app = Flask(__name__, instance_relative_config=False)
    app.config.from_object(Config if config_object is None else config_object)
    app.json.sort_keys = False
    _configure_logging(app.config.get("LOG_LEVEL", Config.LOG_LEVEL), app.debug)

    app.register_blueprint(primes_bp)
    app.register_blueprint(health_bp)

    return app
