import enum


class Language(str, enum.Enum):
    """Languages an entry can be written in"""
    SILESIAN = "SILESIAN"
    POLISH = "POLISH"


# Polish collation order used for the alphabetical index
POLISH_ALPHABET = "aąbcćdeęfghijklłmnńoóprsśtuwyzźż"
