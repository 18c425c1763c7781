import logging
from asgiref.wsgi import WsgiToAsgi
from emp_backend.app import app

logger = logging.getLogger(__name__)

logger.info("Starting ASGI application...")
# uvicorn looks for 'application'
application = WsgiToAsgi(app)
logger.info("ASGI application ready")

if __name__ == "__main__":
    import uvicorn
    settings = app.config['SETTINGS']
    uvicorn.run(application, host=settings.host, port=settings.port)
