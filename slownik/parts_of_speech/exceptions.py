from slownik.exceptions import ConflictException, NotFoundException, ValidationException
from slownik.parts_of_speech import constants


class PartOfSpeechNotFoundException(NotFoundException):
    def __init__(self, detail: str = constants.PART_NOT_FOUND):
        super().__init__(detail=detail)

class PartOfSpeechValidationException(ValidationException):
    pass

class PartOfSpeechConflictException(ConflictException):
    def __init__(self, detail: str = constants.PART_VALUE_TAKEN):
        super().__init__(detail=detail)

class PartOfSpeechInUseException(ConflictException):
    def __init__(self, detail: str = constants.PART_IN_USE):
        super().__init__(detail=detail)
