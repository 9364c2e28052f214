# src/application/validator.py

from src.domain.models import MAX_QUERY_LENGTH, ValidationResult


# Same set a browser trims: ASCII whitespace, line/paragraph separators,
# BOM, and the Unicode space separators (Zs). Not the ASCII file/group
# separators (\x1c-\x1f) or NEL (\x85) that str.strip() would also drop.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def validate_query(text: str) -> ValidationResult:
    """
    Check raw query text before any matching happens.

    The trimmed value is only used for the emptiness check; the length
    limit applies to the untrimmed text, and matching later uses it as-is.
    """
    if not text.strip(WHITESPACE):
        return ValidationResult.EMPTY

    if query_length(text) > MAX_QUERY_LENGTH:
        return ValidationResult.TOO_LONG

    return ValidationResult.VALID


def query_length(text: str) -> int:
    """Length in UTF-16 code units: characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2
