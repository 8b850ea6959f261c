from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blockrender.api.routes import router
from blockrender.config import CORS_ORIGINS
from blockrender.logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Block Kit Renderer",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()
