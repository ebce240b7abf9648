# liftlog/main.py
import time
import logging
import uuid
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from liftlog import models  # noqa: F401  # registers every table on Base.metadata
from liftlog.db import Base, build_engine, build_session_factory
from liftlog.errors import DomainError
from liftlog.routers.auth import router as auth_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.routers.workout_sessions import router as sessions_router
from liftlog.routers.supersets import router as supersets_router
from liftlog.settings import Settings, get_settings

log = logging.getLogger("uvicorn")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Liftlog API",
        openapi_tags=[
            {"name": "auth", "description": "Registration, login & token refresh"},
            {"name": "exercises", "description": "Exercise catalog and moderation"},
            {"name": "workouts", "description": "Single-exercise workout logs"},
            {"name": "workout-sessions", "description": "Workout sessions with exercises and sets"},
            {"name": "supersets", "description": "Supersets inside a workout session"},
        ],
    )

    # One engine per process, handed to every request through get_db
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    if settings.DB_CREATE_ALL:
        Base.metadata.create_all(engine)

    # CORS (relax for local dev; tighten origins in prod via env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_and_log(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = req_id
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = req_id
        log.info("rid=%s %s %s -> %s in %.1fms",
                 req_id, request.method, request.url.path, response.status_code, duration_ms)
        return response

    @app.exception_handler(DomainError)
    async def domain_error(request: Request, exc: DomainError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(SQLAlchemyError)
    async def storage_failure(request: Request, exc: SQLAlchemyError):
        # never leak engine detail to the client
        req_id = getattr(request.state, "request_id", "-")
        log.error("rid=%s storage failure on %s %s", req_id, request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/")
    def root():
        return {"ok": True, "name": "Liftlog API"}

    @app.get("/ping")
    def ping():
        return {"pong": True}

    @app.get("/healthz")
    def healthz():
        # Quick DB sanity check
        try:
            with app.state.session_factory() as db:
                db.execute(text("SELECT 1"))
            return {"status": "ok"}
        except Exception:
            log.exception("healthz: database check failed")
            return {"status": "degraded"}

    @app.get("/version")
    def version():
        return {"version": settings.API_VERSION}

    # Routers
    app.include_router(auth_router)
    app.include_router(exercises_router)
    app.include_router(workouts_router)
    app.include_router(sessions_router)
    app.include_router(supersets_router)
    return app

app = create_app()
