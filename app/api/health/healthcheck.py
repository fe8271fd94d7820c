import logging
import time
from fastapi import Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.dependency import get_db
from app.utility.response import api_response
from app.utility.time import utc_now
from app.api.router_base import router_health as router

logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@router.get(
    "",
    summary="Health Check",
    description="Return data about whether server and database are live",
    responses={
        200: {
            "description": "When server is alive",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 200,
                        "data": {"status": "OK", "database": "connected"},
                        "message": "Server is healthy",
                        "success": True
                    }
                }
            }
        },
        503: {"description": "When the database cannot be reached"}
    }
)
async def healthcheck(db: AsyncSession = Depends(get_db)):
    data = {
        "status": "OK",
        "database": "connected",
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "timestamp": utc_now().isoformat(),
    }

    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database health check failed: {str(e)}")
        data.update({"status": "ERROR", "database": "disconnected"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=api_response(data, "Server is unhealthy", status.HTTP_503_SERVICE_UNAVAILABLE)
        )

    return api_response(data, "Server is healthy")
