import os
from dotenv import load_dotenv

load_dotenv(override=False)

# Server socket
bind = f"{os.getenv('HOST', '0.0.0.0')}:{os.getenv('PORT', '8080')}"
backlog = 2048

# Handlers never block, sync workers are enough
workers = int(os.getenv('WEB_CONCURRENCY', 2))
worker_class = 'sync'
timeout = 30

# Logging
accesslog = '-'
errorlog = '-'
loglevel = os.getenv('LOG_LEVEL', 'info').lower()

# Process naming
proc_name = 'emp-backend'

# Server mechanics
daemon = False
pidfile = None

wsgi_app = 'emp_backend.app:app'


def when_ready(server):
    """Called just after the server is started."""
    server.log.info("emp-backend listening on %s" % bind)


def pre_request(worker, req):
    """Called just before a request."""
    worker.log.debug("%s %s" % (req.method, req.path))
