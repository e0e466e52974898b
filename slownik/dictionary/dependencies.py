from slownik.dictionary.service import DictionaryService

def get_dictionary_service() -> DictionaryService:
    """Get DictionaryService instance"""
    return DictionaryService()
