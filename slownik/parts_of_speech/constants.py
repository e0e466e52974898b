# Parts of speech module constants

PART_NOT_FOUND = "Część mowy nie istnieje."
PART_LABEL_REQUIRED = "Etykieta części mowy jest wymagana."
PART_LABEL_EMPTY = "Etykieta nie może być pusta."
PART_VALUE_INVALID = "Nie udało się wygenerować wartości części mowy."
PART_VALUE_TAKEN = "Część mowy o tej wartości już istnieje."
PART_IN_USE = "Nie można usunąć części mowy używanej w istniejących hasłach."
