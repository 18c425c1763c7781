import logging
from flask import Flask
from werkzeug.exceptions import InternalServerError

from emp_backend.config import load_settings
from emp_backend.cors import install_cors
from emp_backend.health import health_bp

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings=None):
    """Build the Flask app. Settings come from the environment unless given."""
    if settings is None:
        settings = load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config['SETTINGS'] = settings
    app.config['PROPAGATE_EXCEPTIONS'] = False

    install_cors(app, settings.cors)
    app.register_blueprint(health_bp)

    @app.errorhandler(InternalServerError)
    def internal_error(e):
        original = getattr(e, 'original_exception', None) or e
        logger.error(f"Unhandled error: {original}", exc_info=original)
        return "internal server error", 500, {"Content-Type": "text/plain; charset=utf-8"}

    return app


app = create_app()
