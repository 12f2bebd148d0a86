# main.py
"""
Point d'entrée de l'API with.
Enregistre tous les modules via leurs routers.

Architecture : modules verticaux (repository → service → router)
+ couche shared (modèles, deps, erreurs) + infra (flux realtime).
"""
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, InterfaceError, TimeoutError as PoolTimeoutError

from withapp.core.config import settings
from withapp.core.log import configure_logging
from withapp.shared.errors import WithError, ServiceUnavailable

from withapp.modules.auth.router         import router as auth_router
from withapp.modules.profile.router      import router as profile_router
from withapp.modules.question.router     import router as question_router
from withapp.modules.vote.router         import router as vote_router
from withapp.modules.notification.router import router as notification_router
from withapp.modules.board.router        import router as board_router
from withapp.modules.realtime.router     import router as realtime_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(question_router)
app.include_router(vote_router)
app.include_router(notification_router)
app.include_router(board_router)
app.include_router(realtime_router)


# ── Erreurs ────────────────────────────────────────────────

@app.exception_handler(WithError)
async def with_error_handler(request: Request, exc: WithError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
@app.exception_handler(PoolTimeoutError)
async def store_unavailable_handler(request: Request, exc: Exception):
    logger.error("Store injoignable sur %s %s : %s", request.method, request.url.path, exc)
    err = ServiceUnavailable("SERVICE_UNAVAILABLE")
    return JSONResponse(
        status_code=err.status_code,
        content={"detail": err.message, "code": err.code},
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": "1.0.0"}
