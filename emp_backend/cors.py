"""
Cross-origin policy filter.

flask-cors decorates responses for allow-listed origins. Two request hooks
complete it: pre-flights from an allowed origin are answered before routing,
so every path accepts them, and actual requests also carry the allowed methods.
"""
import logging
from flask import current_app, request
from flask_cors import CORS

logger = logging.getLogger(__name__)

ACL_ALLOW_METHODS = "Access-Control-Allow-Methods"


def install_cors(app, policy):
    """Attach ``policy`` to every request handled by ``app``."""

    @app.before_request
    def short_circuit_preflight():
        origin = request.headers.get("Origin")
        requested = request.headers.get("Access-Control-Request-Method")
        if policy.is_preflight(request.method, origin, requested):
            logger.debug(f"Pre-flight {requested} {request.path} from {origin}")
            return current_app.response_class(status=200)
        if origin and not policy.allows_origin(origin):
            logger.debug(f"Origin {origin!r} not allowed, no CORS headers for {request.path}")
        return None

    # Registered before CORS() so it runs after the flask-cors hook
    @app.after_request
    def add_allowed_methods(response):
        if policy.allows_origin(request.headers.get("Origin")) and ACL_ALLOW_METHODS not in response.headers:
            response.headers[ACL_ALLOW_METHODS] = policy.methods_header
        return response

    CORS(app, resources={
        policy.path_pattern: {
            "origins": policy.origin_patterns,
            "methods": policy.methods_header,
            "supports_credentials": policy.allow_credentials,
        }
    })

    logger.info(
        f"CORS enabled for {', '.join(policy.allowed_origins)} "
        f"(methods: {policy.methods_header}, credentials: {policy.allow_credentials})"
    )
    return app
