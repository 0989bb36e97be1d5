from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import config
from app.errors import GenerationError, MissingCredentialError, NotFoundError, StoreError
from app.features.comics.router import router as comics_router
from app.features.export.router import router as export_router
from app.features.generate.router import router as generate_router
from app.features.translate.router import router as translate_router
from app.lib.db import Store
from app.logger import get_logger

log = get_logger(__name__)

# HTTP status for each domain error; GenerationParseError never escapes the story service
_ERROR_STATUS = {
    NotFoundError: 404,
    StoreError: 500,
    GenerationError: 502,
    MissingCredentialError: 503,
}

def _register_error_handlers(app: FastAPI) -> None:
    for exc_type, status in _ERROR_STATUS.items():
        async def _handler(request: Request, exc: Exception, status: int = status) -> JSONResponse:
            if status >= 500:
                log.error(f"{request.method} {request.url.path} failed: {exc}")
            return JSONResponse({"detail": str(exc)}, status_code=status)
        app.add_exception_handler(exc_type, _handler)

def create_app(store: Optional[Store] = None) -> FastAPI:
    """
    Build the API. `store` is created from DATABASE_URL at startup unless one is passed in
    (tests hand in their own). It is disposed on shutdown either way.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        s = store or Store(config.database_url, echo=config.db_echo)
        s.create_all()
        app.state.store = s
        try:
            yield
        finally:
            s.dispose()

    app = FastAPI(title="Comic Studio API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials="*" not in config.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],  # for PDF downloads
    )
    _register_error_handlers(app)

    app.include_router(generate_router)
    app.include_router(comics_router)
    app.include_router(export_router)
    app.include_router(translate_router)

    @app.get("/healthz", tags=["health"])
    async def healthz():
        return {"ok": True}

    # built front-end, served last so it never shadows /api
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(config.static_dir), html=True), name="static")
        log.info(f"serving front-end bundle from {config.static_dir}")

    return app

app = create_app()
