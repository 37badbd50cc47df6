# app/api/v1/system.py

import logging
from fastapi import APIRouter
from sqlalchemy import text
from app.core.exceptions import InternalError
from app.database import engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness probe"""
    return {"status": "healthy", "service": "drinks-review"}


@router.get("/db-test")
def test_db():
    """Database connectivity check"""
    try:
        with engine.connect() as connection:
            result = connection.execute(text("SELECT 1"))
            return {"status": "ok", "result": result.fetchone()[0]}
    except Exception:
        logger.exception("Database connectivity check failed")
        raise InternalError("Database connection failed")
