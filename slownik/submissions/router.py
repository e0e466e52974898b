import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.auth.dependencies import require_admin
from slownik.database import get_db
from slownik.exceptions import AppException, InternalServerException
from slownik.submissions import constants
from slownik.submissions.dependencies import get_review_workflow, get_submission_service
from slownik.submissions.models import SubmissionStatus
from slownik.submissions.schemas import (
    ApproveResponse,
    RejectResponse,
    ReviewRequest,
    SubmissionCreate,
    SubmissionCreatedResponse,
    SubmissionListResponse,
)
from slownik.submissions.service import SubmissionService
from slownik.submissions.workflow import ReviewWorkflow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.post("", response_model=SubmissionCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_submission(
    data: SubmissionCreate,
    service: SubmissionService = Depends(get_submission_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Propose a new word

    - **targetWord**: comma-separated; the first translation is the primary one
    - **categoryId** or **newCategoryName**: existing category or a new one to create
    - **exampleSentences**: at least one with both sides filled in
    """
    try:
        submission = await service.create_submission(data, db)
        return SubmissionCreatedResponse(
            submission_id=submission.id,
            message=constants.SUBMISSION_CREATED,
        )
    except AppException:
        raise
    except Exception:
        logger.exception("Submission error")
        raise InternalServerException()


@router.get("", response_model=SubmissionListResponse, dependencies=[Depends(require_admin)])
async def list_submissions(
    status: Optional[SubmissionStatus] = Query(None, description="PENDING, APPROVED or REJECTED"),
    limit: int = Query(constants.DEFAULT_SUBMISSIONS_LIMIT, ge=1, description="Capped at 200"),
    service: SubmissionService = Depends(get_submission_service),
    db: AsyncSession = Depends(get_db)
):
    """Submissions for the review queue, newest first"""
    try:
        submissions = await service.list_submissions(db, status=status, limit=limit)
        return SubmissionListResponse(submissions=submissions, total=len(submissions))
    except AppException:
        raise
    except Exception:
        logger.exception("List submissions error")
        raise InternalServerException()


@router.patch(
    "/{submission_id}",
    response_model=Union[ApproveResponse, RejectResponse],
    dependencies=[Depends(require_admin)],
)
async def review_submission(
    data: ReviewRequest,
    submission_id: int = Path(..., description="Submission ID"),
    workflow: ReviewWorkflow = Depends(get_review_workflow),
    db: AsyncSession = Depends(get_db)
):
    """
    Approve or reject a pending submission

    - **approve**: creates the dictionary entry and returns its id
    - **reject**: closes the submission without an entry
    Reviewing a submission twice returns 409.
    """
    try:
        if data.action == "approve":
            entry_id = await workflow.approve(submission_id, data.admin_id, data.review_notes, db)
            return ApproveResponse(message=constants.SUBMISSION_APPROVED, entry_id=entry_id)

        submission = await workflow.reject(submission_id, data.admin_id, data.review_notes, db)
        return RejectResponse(message=constants.SUBMISSION_REJECTED, submission=submission)
    except AppException:
        raise
    except Exception:
        logger.exception("Review submission error")
        raise InternalServerException()
