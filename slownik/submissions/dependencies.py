from slownik.submissions.service import SubmissionService
from slownik.submissions.workflow import ReviewWorkflow

def get_submission_service() -> SubmissionService:
    """Get SubmissionService instance"""
    return SubmissionService()

def get_review_workflow() -> ReviewWorkflow:
    """Get ReviewWorkflow instance"""
    return ReviewWorkflow()
