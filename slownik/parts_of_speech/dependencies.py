from slownik.parts_of_speech.service import PartOfSpeechService

def get_part_of_speech_service() -> PartOfSpeechService:
    return PartOfSpeechService()
