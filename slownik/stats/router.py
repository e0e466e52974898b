import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.auth.dependencies import require_admin
from slownik.database import get_db
from slownik.exceptions import AppException, InternalServerException
from slownik.stats.schemas import AdminStatsResponse
from slownik.stats.service import StatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/stats", tags=["Admin: Stats"], dependencies=[Depends(require_admin)])


def get_stats_service() -> StatsService:
    """Get StatsService instance"""
    return StatsService()


@router.get("", response_model=AdminStatsResponse)
async def get_admin_stats(
    service: StatsService = Depends(get_stats_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Dashboard counters: approved entries, pending submissions, and today's
    approvals and rejections (UTC day)
    """
    try:
        return await service.get_admin_stats(db)
    except AppException:
        raise
    except Exception:
        logger.exception("Admin stats error")
        raise InternalServerException()
