"""Password strength rules for new client accounts.

Each rule is checked on its own so every unmet requirement can be reported
in a single message.
"""

import re
from collections.abc import Callable

MIN_LENGTH = 8

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"[^A-Za-z0-9]")

RULES: list[tuple[str, Callable[[str], bool]]] = [
    (f"at least {MIN_LENGTH} characters", lambda pw: len(pw) >= MIN_LENGTH),
    ("an uppercase letter", lambda pw: bool(_UPPER_RE.search(pw))),
    ("a lowercase letter", lambda pw: bool(_LOWER_RE.search(pw))),
    ("a number", lambda pw: bool(_DIGIT_RE.search(pw))),
    ("a special character", lambda pw: bool(_SPECIAL_RE.search(pw))),
]


def validate_password_policy(password: str) -> list[str]:
    """Return the names of the requirements ``password`` does not meet."""
    return [name for name, check in RULES if not check(password)]


def password_policy_message(unmet: list[str]) -> str:
    return f"Password must contain {', '.join(unmet)}."
