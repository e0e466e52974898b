from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.entries.models import DictionaryEntry, EntryStatus
from slownik.stats.schemas import AdminStatsResponse
from slownik.submissions.models import PublicSubmission, SubmissionStatus


def start_of_today(now: datetime = None) -> datetime:
    """Midnight UTC of the current day"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


class StatsService:
    """Counters for the admin dashboard"""

    async def _count(self, db: AsyncSession, column, *conditions) -> int:
        result = await db.execute(select(func.count(column)).where(*conditions))
        return result.scalar() or 0

    async def get_admin_stats(self, db: AsyncSession) -> AdminStatsResponse:
        today = start_of_today()
        return AdminStatsResponse(
            total_entries=await self._count(
                db, DictionaryEntry.id,
                DictionaryEntry.status == EntryStatus.APPROVED,
            ),
            pending_submissions=await self._count(
                db, PublicSubmission.id,
                PublicSubmission.status == SubmissionStatus.PENDING,
            ),
            approved_today=await self._count(
                db, DictionaryEntry.id,
                DictionaryEntry.status == EntryStatus.APPROVED,
                DictionaryEntry.approved_at >= today,
            ),
            rejected_today=await self._count(
                db, PublicSubmission.id,
                PublicSubmission.status == SubmissionStatus.REJECTED,
                PublicSubmission.reviewed_at >= today,
            ),
        )
