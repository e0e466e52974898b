# Entries module constants

ENTRY_NOT_FOUND = "Entry not found"
ENTRY_REQUIRED_FIELDS = "Missing required fields"
ENTRY_SLUG_TAKEN = "Slug already in use. Choose a different one."
ENTRY_INVALID_CATEGORY = "Invalid category ID"

# Hard ceiling for admin listings
MAX_ENTRIES_PAGE_SIZE = 200
