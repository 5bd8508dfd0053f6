def redact_id(identifier: str | None) -> str:
    """
    Redact a profile identifier for logging purposes.
    Shows the first 6 characters followed by ***.
    """
    if not identifier:
        return "None"
    if len(identifier) <= 6:
        return identifier
    return f"{identifier[:6]}***"
