import os
import re
import logging
from dataclasses import dataclass, field
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:4200",
    "http://app.local",
    "http://app.prod.local",
)
DEFAULT_ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")
KNOWN_METHODS = {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"}

# scheme://host[:port], nothing after the authority
ORIGIN_RE = re.compile(r"^[a-z][a-z0-9+.-]*://[^/\s?#]+$", re.IGNORECASE)


@dataclass(frozen=True)
class CorsPolicy:
    """Cross-origin policy applied to every path of the app."""

    allowed_origins: tuple = DEFAULT_ALLOWED_ORIGINS
    allowed_methods: tuple = DEFAULT_ALLOWED_METHODS
    allow_credentials: bool = True
    path_pattern: str = r"/*"

    def __post_init__(self):
        if not self.allowed_origins:
            raise ValueError("At least one allowed origin is required")
        for origin in self.allowed_origins:
            if origin == "*":
                raise ValueError("Wildcard origins are not supported, list each origin explicitly")
            if not ORIGIN_RE.match(origin):
                raise ValueError(f"Invalid origin {origin!r}, expected scheme://host[:port]")

        methods = tuple(m.upper() for m in self.allowed_methods)
        if not methods:
            raise ValueError("At least one allowed method is required")
        unknown = [m for m in methods if m not in KNOWN_METHODS]
        if unknown:
            raise ValueError(f"Unknown HTTP method(s): {', '.join(unknown)}")
        object.__setattr__(self, "allowed_methods", methods)

    @property
    def methods_header(self):
        return ", ".join(self.allowed_methods)

    @property
    def origin_patterns(self):
        """Anchored, case-sensitive patterns so flask-cors matches origins exactly."""
        return [re.compile(re.escape(origin) + r"\Z") for origin in self.allowed_origins]

    def allows_origin(self, origin):
        if not origin or not isinstance(origin, str):
            return False
        return origin in self.allowed_origins

    def allows_method(self, method):
        if not method:
            return False
        return method.upper() in self.allowed_methods

    def is_preflight(self, method, origin, requested_method):
        return (
            method == "OPTIONS"
            and self.allows_origin(origin)
            and self.allows_method(requested_method)
        )


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    debug: bool = False
    cors: CorsPolicy = field(default_factory=CorsPolicy)


def _split(value):
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_bool(name, value):
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be true or false, got {value!r}")


def load_settings():
    """Build settings from the environment, reading .env without overriding real variables."""
    load_dotenv(override=False)

    port = os.getenv("PORT", "8080")
    try:
        port = int(port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port!r}") from None

    origins = os.getenv("CORS_ALLOWED_ORIGINS")
    methods = os.getenv("CORS_ALLOWED_METHODS")
    credentials = os.getenv("CORS_ALLOW_CREDENTIALS")

    cors = CorsPolicy(
        allowed_origins=_split(origins) if origins is not None else DEFAULT_ALLOWED_ORIGINS,
        allowed_methods=_split(methods) if methods is not None else DEFAULT_ALLOWED_METHODS,
        allow_credentials=_parse_bool("CORS_ALLOW_CREDENTIALS", credentials) if credentials is not None else True,
    )

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=os.getenv("FLASK_ENV") == "development",
        cors=cors,
    )
