from flask import Blueprint

health_bp = Blueprint("health", __name__)


@health_bp.route("/", methods=["GET"])
@health_bp.route("/healthz", methods=["GET"])
def healthz():
    """Liveness probe, no dependency checks"""
    return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}
