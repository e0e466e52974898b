from slownik.exceptions import ConflictException, NotFoundException, ValidationException
from slownik.submissions import constants


class SubmissionValidationException(ValidationException):
    def __init__(self, detail: str = constants.SUBMISSION_REQUIRED_FIELDS):
        super().__init__(detail=detail)

class DuplicateSubmissionException(ConflictException):
    def __init__(self, detail: str = constants.SUBMISSION_DUPLICATE):
        super().__init__(detail=detail)

class SubmissionNotFoundException(NotFoundException):
    def __init__(self, detail: str = constants.SUBMISSION_NOT_FOUND):
        super().__init__(detail=detail)

class SubmissionAlreadyReviewedException(ConflictException):
    def __init__(self, detail: str = constants.SUBMISSION_ALREADY_REVIEWED):
        super().__init__(detail=detail)

class SlugAllocationException(ConflictException):
    def __init__(self, detail: str = constants.SUBMISSION_SLUG_CONFLICT):
        super().__init__(detail=detail)
