"""Mask an API key for display."""


def mask_api_key(key: str | None) -> str | None:
    """Keep the first and last four characters of ``key``.

    Short keys are fully masked; empty or missing keys give None.
    """
    if not key:
        return None
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}...{key[-4:]}"
