"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.common import Envelope, ok
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=Envelope[HealthResponse])
def get_health(db: Annotated[Session, Depends(get_db)]) -> Envelope[HealthResponse]:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    connected = check_db_connected(db)
    return ok(
        HealthResponse(
            status="ok" if connected else "degraded",
            environment=settings.APP_ENV,
            database="connected" if connected else "disconnected",
        )
    )
