import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from survey_service.core.config import settings
from survey_service.core.db import Base, make_engine, make_session_factory, ping
from survey_service.core.logging_setup import configure_logging
from survey_service.api.surveys import router as surveys_router
from survey_service.services.collection import SqlSurveyFormCollection

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

engine = make_engine(settings.database_url)
SessionLocal = make_session_factory(engine)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if not Path(".env").exists():
        logger.info(".env file not found, using system environment")
    try:
        ping(engine)
    except Exception:
        logger.critical("database ping failed", exc_info=True)
        raise
    Base.metadata.create_all(bind=engine)
    logger.info("connected to database")
    yield
    engine.dispose()

app = FastAPI(title="Survey Form Update API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["PUT", "OPTIONS"],
    allow_headers=["Content-Type", settings.role_header, "X-User-ID"],
)

# one collection handle per process, shared by every request
app.state.survey_forms = SqlSurveyFormCollection(SessionLocal)

app.include_router(surveys_router)

@app.get("/health")
def health():
    return {"ok": True}
