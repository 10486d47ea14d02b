"""
Health check da API
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from thingful.core.config import settings
from thingful.core.dependencies import get_db
from thingful.core.rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health Check"],
)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/",
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Verifica o status da API e a conexão com o banco de dados"
)
@limiter.exempt
def health_check(db: Session = Depends(get_db)):
    """
    Health check básico

    Retorna o status da API, do banco e do rate limiting.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        logger.error(f"Erro ao conectar com banco de dados: {e}")
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "timestamp": now_iso(),
        "environment": settings.ENVIRONMENT,
        "database": {
            "status": db_status
        },
        "rate_limiting": {
            "enabled": settings.RATE_LIMIT_ENABLED,
            "limit_per_minute": settings.RATE_LIMIT_PER_MINUTE
        }
    }


@router.get(
    "/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness Check",
    description="Verifica se a API está pronta para receber requisições"
)
@limiter.exempt
def readiness_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"API não está pronta: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "timestamp": now_iso(), "error": str(e)},
        )
    return {"status": "ready", "timestamp": now_iso()}


@router.get(
    "/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness Check",
    description="Verifica se a API está viva (usado por orquestradores como Kubernetes)"
)
@limiter.exempt
def liveness_check():
    return {"status": "alive", "timestamp": now_iso()}
