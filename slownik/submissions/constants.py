# Submissions module constants

EXAMPLE_SEPARATOR = " | "
NEW_CATEGORY_NOTE_PREFIX = "Propozycja nowej kategorii: "
ALTERNATIVES_NOTE_PREFIX = "Alternatywne tłumaczenia:"

# Listing
DEFAULT_SUBMISSIONS_LIMIT = 50
MAX_SUBMISSIONS_LIMIT = 200

# Approval retries after a slug collision on insert
MAX_APPROVE_ATTEMPTS = 3

# Messages
SUBMISSION_CREATED = "Submission created successfully"
SUBMISSION_APPROVED = "Submission approved and dictionary entry created"
SUBMISSION_REJECTED = "Submission rejected"

# Error messages
SUBMISSION_REQUIRED_FIELDS = "Missing required fields: sourceWord, targetWord, categoryId"
SUBMISSION_EXAMPLE_REQUIRED = "At least one example sentence is required"
SUBMISSION_INVALID_CATEGORY = "Invalid category ID"
SUBMISSION_DUPLICATE = "A similar submission is already pending review"
SUBMISSION_NOT_FOUND = "Submission not found"
SUBMISSION_ALREADY_REVIEWED = "Submission has already been reviewed"
SUBMISSION_SLUG_CONFLICT = "Could not allocate a unique slug for this entry. Try again."
