"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from order_service.db.database import get_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(request: Request, db: AsyncSession = Depends(get_db)):
    """Report service health, including database reachability."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"[HEALTH] Database unreachable: {type(e).__name__}: {str(e)}")
        return JSONResponse(
            status_code=503, content={"status": "unhealthy", "database": "unreachable"}
        )
    return {"status": "healthy", "database": "ok"}
