"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from balance_coach import __version__
from balance_coach.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.balance_coach_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Visual Balance Coach",
        description="Composition engine for teaching visual weight: placement, symmetry and torque balance",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from balance_coach.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
