import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Uppercase, lowercase, digit and one of the punctuation characters below.
PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])"
    r"(?=.*[" + re.escape(PASSWORD_SYMBOLS) + r"]).{7,}$",
)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email or ""))


def is_valid_password(password: str) -> bool:
    return bool(PASSWORD_PATTERN.fullmatch(password or ""))
