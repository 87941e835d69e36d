"""Aplicação principal FastAPI"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from liga_stats.core.config import settings
from liga_stats.core.database import init_db, close_db
from liga_stats.core.exceptions import LigaStatsError
from liga_stats.core.logging_config import setup_logging
from liga_stats.core.middleware import OptimizedMiddleware
from liga_stats.core.rate_limit import limiter
from liga_stats.api.v1.api import api_router
import logging

# Configura logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup e shutdown"""
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciando...")
    init_db()
    yield
    logger.info("Aplicação encerrando...")
    close_db()


# Cria aplicação FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="API de classificação e estatísticas de liga amadora de futebol",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Estado do limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(LigaStatsError)
async def liga_stats_error_handler(request: Request, exc: LigaStatsError):
    """NotFound -> 404, ValidationError -> 400, ConsistencyError -> 409"""
    if exc.status_code >= 500:
        logger.error(f"Erro em {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.kind, "detail": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Campos ausentes ou com tipo errado também são erros de validação"""
    return JSONResponse(
        status_code=400,
        content={"error": "validation_error", "detail": jsonable_encoder(exc.errors())},
    )


# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(OptimizedMiddleware)

# Inclui routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root():
    """Endpoint raiz"""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": {
            "standings": f"{settings.API_V1_PREFIX}/statistics/standings",
            "players": f"{settings.API_V1_PREFIX}/statistics/players",
            "teams": f"{settings.API_V1_PREFIX}/teams",
            "matches": f"{settings.API_V1_PREFIX}/matches",
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "liga_stats.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
