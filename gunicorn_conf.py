# START OF FILE: gunicorn_conf.py

import os

from astrosolar.shared.logger import logger
from astrosolar.shared.config import Settings, PORT
from astrosolar.app.services.lead_service import LeadService, build_backends

bind = f"0.0.0.0:{PORT}"
workers = int(os.environ.get('WEB_CONCURRENCY', 2))
worker_class = "uvicorn.workers.UvicornWorker"
wsgi_app = "main:fastapi_app"


def when_ready(server):
    """
    Runs once when the Gunicorn master is ready.
    Reports which integrations the workers will use. Secrets are not printed.
    """
    settings = Settings.from_env()

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set. /api/chat will answer with a configuration error.")

    backend = LeadService(build_backends(settings)).active_backend()
    if backend is None:
        logger.warning("No lead backend configured. Leads will only be written to the logs.")
    else:
        logger.info(f"Leads will be stored via '{backend.provider_name}'.")

# END OF FILE: gunicorn_conf.py
