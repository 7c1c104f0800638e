"""Health check endpoint."""

from fastapi import APIRouter
from sqlalchemy import text

from app.adapters.persistence import database

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Check API and database connectivity."""
    if database.engine is None:
        db_status = "error: DATABASE_URL is not configured"
    else:
        try:
            async with database.engine.connect() as conn:
                result = await conn.execute(text("SELECT 1"))
                result.scalar()
            db_status = "connected"
        except Exception as e:
            db_status = f"error: {e}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "service": "Demo catalog API",
    }
