"""
Whole-word redaction of offensive terms.

Runs independently of classification: it re-scans the original text against
the full catch-all lexicon, so it may mask terms the tiered passes never
flagged. Terms embedded inside longer words are left alone.
"""

from typing import Optional

from .lexicon import DEFAULT_LEXICON, Lexicon

DEFAULT_MASK_CHAR = "*"


def validate_mask_char(mask_char: str) -> str:
    """Mask characters must be exactly one character so lengths are preserved."""
    if not isinstance(mask_char, str) or len(mask_char) != 1:
        raise ValueError(f"mask_char must be a single character, got {mask_char!r}")
    return mask_char


def redact(
    original_text: Optional[str],
    lexicon: Lexicon = DEFAULT_LEXICON,
    mask_char: str = DEFAULT_MASK_CHAR,
) -> Optional[str]:
    """
    Mask every whole-word lexicon term in `original_text`.

    Args:
        original_text: Text as supplied by the caller (not lower-cased)
        lexicon: Lexicon whose catch-all terms are masked
        mask_char: Character repeated once per masked character

    Returns:
        Redacted text, same length as the input; empty/None is returned as is
    """
    validate_mask_char(mask_char)
    return lexicon.redact(original_text, mask_char=mask_char)
