"""
FLASK APP ENTRY POINT - TOTP ENROLLMENT SERVER

Sets up the Flask app, enables CORS for the enrollment page and registers
the routes from totp_web/routes.py. Settings come from TOTP_WEB_* env vars
(see totp_web/config.py).

Run:
    python -m totp_web.app
    TOTP_WEB_PORT=5050 TOTP_WEB_DEBUG=1 python -m totp_web.app
"""

import logging

from flask import Flask
from flask_cors import CORS

from totp_web.config import load_config
from totp_web.routes import ERROR_HANDLERS, index, totp_bp

logger = logging.getLogger(__name__)


def create_app(overrides: dict = None) -> Flask:
    """
    Build a configured Flask app.

    Arguments:
        overrides: config values applied on top of the environment (tests)
    """
    config = load_config()
    if overrides:
        config.update(overrides)

    app = Flask(__name__, static_folder=config["STATIC_DIR"], static_url_path="/static")
    app.config.from_mapping(config)

    # allow the page to call the API when it is served from another origin
    CORS(app, origins=config["CORS_ORIGINS"])

    app.register_blueprint(totp_bp)
    if config["STATIC_DIR"]:
        app.add_url_rule("/", "index", index)
    for exc_type, handler in ERROR_HANDLERS.items():
        app.register_error_handler(exc_type, handler)

    logger.debug("App created, static dir %s", config["STATIC_DIR"])
    return app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    app = create_app()
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"])


if __name__ == '__main__':
    main()
