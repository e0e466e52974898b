# Categories module constants

# Error messages
CATEGORY_NOT_FOUND = "Kategoria nie istnieje."
CATEGORY_NAME_REQUIRED = "Nazwa kategorii jest wymagana."
CATEGORY_SLUG_REQUIRED = "Slug kategorii jest wymagany."
CATEGORY_SLUG_INVALID = "Nie udało się wygenerować slug-a dla kategorii."
CATEGORY_SLUG_TAKEN = "Kategoria o tym slug-u już istnieje."
CATEGORY_NAME_TAKEN = "Kategoria o takiej nazwie już istnieje."
CATEGORY_IN_USE = "Nie można usunąć kategorii powiązanej z istniejącymi wpisami."
