# path: main.py
from typing import Optional

import uvicorn
from fastapi import FastAPI

from astrosolar.shared.logger import logger
from astrosolar.shared.config import Settings, PORT
from astrosolar.app.services.chat_service import ChatService
from astrosolar.app.services.lead_service import LeadService, build_backends
from astrosolar.api.http import chat_handlers, lead_handlers


def create_app(
    settings: Optional[Settings] = None,
    chat_service: Optional[ChatService] = None,
    lead_service: Optional[LeadService] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.chat_service = chat_service or ChatService(settings)
    app.state.lead_service = lead_service or LeadService(build_backends(settings))

    app.include_router(chat_handlers.router)
    app.include_router(lead_handlers.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


fastapi_app = create_app()


def main():
    logger.info("Starting Uvicorn server...")
    uvicorn.run(app=fastapi_app, host="0.0.0.0", port=PORT)

if __name__ == "__main__":
    main()
# path: main.py
