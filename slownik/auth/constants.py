# Auth module constants

DEFAULT_SESSION_SECRET = "ssm-admin-secret"

# Error messages
LOGIN_FIELDS_REQUIRED = "Podaj adres e-mail oraz hasło."
LOGIN_INVALID_CREDENTIALS = "Nieprawidłowe dane logowania."
UNAUTHORIZED = "Unauthorized"
