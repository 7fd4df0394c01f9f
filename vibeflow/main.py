# vibeflow/main.py

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vibeflow.api.chat.routes import router as chat_router
from vibeflow.api.mood.routes import router as mood_router
from vibeflow.api.notifications.routes import router as notifications_router
from vibeflow.api.profile.routes import router as profile_router
from vibeflow.api.recommendation.routes import router as recommendation_router
from vibeflow.api.session.routes import router as session_router
from vibeflow.config import settings
from vibeflow.dependencies import get_recommendation_service, get_session_registry
from vibeflow.infrastructure.db import bootstrap


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    for name in ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = settings()
    configure_logging(cfg.log_level)
    await bootstrap.init_engine(cfg)
    yield
    await get_session_registry().close_all()
    await get_recommendation_service().wait_for_background()
    await bootstrap.dispose_engine()


app = FastAPI(title="VibeFlow API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session_router)
app.include_router(mood_router)
app.include_router(recommendation_router)
app.include_router(chat_router)
app.include_router(profile_router)
app.include_router(notifications_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
