def normalize_email(value: str | None) -> str:
    """Lowercase and trim. Idempotent."""
    if not value:
        return ""
    return value.strip().lower()


def emails_match(stored: str | None, normalized: str) -> bool:
    if not stored or not normalized:
        return False
    return normalize_email(str(stored)) == normalized
