from slownik.models import CustomModel


class AdminStatsResponse(CustomModel):
    total_entries: int
    pending_submissions: int
    approved_today: int
    rejected_today: int
