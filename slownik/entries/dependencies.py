from slownik.entries.service import EntryService

def get_entry_service() -> EntryService:
    """Get EntryService instance"""
    return EntryService()
