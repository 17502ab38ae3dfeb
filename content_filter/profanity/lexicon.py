"""
Offensive-term lexicon for text moderation.

One canonical, ordered list of tagged entries (term -> category). Every other
view of the lexicon (per-category term tuples, the merged catch-all tuple,
compiled redaction patterns) is derived from it once, at construction time.

Two matching modes are exposed and deliberately kept separate:
- substring-contains (`Lexicon.contains_any`): raw case-insensitive substring test
- whole-word-bounded (`Lexicon.redact`): regex match that ignores terms
  embedded inside longer words
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Lexicon category of a single term."""
    MILD = "mild"
    SEVERE = "severe"
    HATE = "hate"
    GENERAL = "general"  # catch-all only, never tiered


@dataclass(frozen=True)
class LexiconEntry:
    """A single lowercase lexicon term."""
    term: str
    category: Category
    catch_all: bool = True


# Catch-all terms, in the order redaction applies them.
_CATCH_ALL_PROFANITY: Tuple[str, ...] = (
    "damn", "hell", "shit", "fuck", "bitch", "ass", "bastard", "crap",
    "piss", "whore", "slut", "stupid", "idiot", "moron", "retard",
    "cocksucker", "motherfucker", "asshole", "dickhead", "pussy", "tits", "cunt",
    # Obfuscated spellings
    "fck", "sht", "btch", "fk", "sh!t", "f*ck", "b!tch", "a$$", "f***",
    "f-ck", "sh-t", "fvck", "shyt", "phuck", "shiit", "bytch", "azz",
)

HATE_SPEECH_TERMS: Tuple[str, ...] = (
    "fag", "nigger", "chink", "spic", "wetback", "gook", "kike", "towelhead",
)

SEVERE_TERMS: Tuple[str, ...] = (
    "fuck", "shit", "bitch", "ass", "bastard", "cocksucker", "motherfucker",
    "asshole", "dickhead", "pussy", "whore", "slut", "tits", "cunt",
)

MILD_TERMS: Tuple[str, ...] = (
    "damn", "hell", "crap", "piss", "sucks", "stupid", "dumb", "idiot", "moron",
)


def _build_default_entries() -> List[LexiconEntry]:
    """
    Tag every default term with exactly one category.

    Hate terms win over severe, severe over mild. Catch-all terms that appear
    in no tier become GENERAL. Mild terms missing from the catch-all list keep
    their category but are excluded from catch-all matching.
    """
    catch_all = set(_CATCH_ALL_PROFANITY) | set(HATE_SPEECH_TERMS)
    entries: List[LexiconEntry] = []
    seen = set()

    for category, terms in (
        (Category.HATE, HATE_SPEECH_TERMS),
        (Category.SEVERE, SEVERE_TERMS),
        (Category.MILD, MILD_TERMS),
    ):
        for term in terms:
            if term in seen:
                continue
            seen.add(term)
            entries.append(LexiconEntry(term, category, catch_all=term in catch_all))

    for term in _CATCH_ALL_PROFANITY:
        if term not in seen:
            seen.add(term)
            entries.append(LexiconEntry(term, Category.GENERAL))

    return entries


def _catch_all_order(entries: Iterable[LexiconEntry]) -> Tuple[str, ...]:
    """
    Order catch-all terms the way redaction walks them.

    Known profanity first (in its canonical list order), then hate terms,
    then any extra terms in the order they were added.
    """
    members = [e.term for e in entries if e.catch_all]
    rank = {term: i for i, term in enumerate(_CATCH_ALL_PROFANITY + HATE_SPEECH_TERMS)}
    fallback = len(rank)
    indexed = sorted(enumerate(members), key=lambda item: (rank.get(item[1], fallback), item[0]))
    return tuple(term for _, term in indexed)


def whole_word_pattern(term: str) -> Pattern[str]:
    """
    Compile a case-insensitive whole-word pattern for a literal term.

    Special characters are escaped so obfuscations like "f*ck" or "a$$"
    match literally. Word edges are lookarounds rather than ``\\b`` so that
    terms beginning or ending in punctuation still match before whitespace.
    """
    return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)", re.IGNORECASE)


class Lexicon:
    """
    Immutable, tagged set of offensive terms.

    Instances never change after construction; derive a new one with
    `with_extra_terms` instead.
    """

    def __init__(self, entries: Iterable[LexiconEntry]):
        ordered: List[LexiconEntry] = []
        seen = set()
        for entry in entries:
            term = entry.term.strip().lower()
            if not term or term in seen:
                continue
            seen.add(term)
            ordered.append(LexiconEntry(term, Category(entry.category), entry.catch_all))

        self._entries: Tuple[LexiconEntry, ...] = tuple(ordered)
        self._index: Dict[str, Category] = {e.term: e.category for e in self._entries}
        self._by_category: Dict[Category, Tuple[str, ...]] = {
            category: tuple(e.term for e in self._entries if e.category == category)
            for category in Category
        }
        self._catch_all: Tuple[str, ...] = _catch_all_order(self._entries)
        self._patterns: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
            (term, whole_word_pattern(term)) for term in self._catch_all
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.category_of(term) is not None

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.value}={len(t)}" for c, t in self._by_category.items())
        return f"Lexicon({counts}, catch_all={len(self._catch_all)})"

    @property
    def entries(self) -> Tuple[LexiconEntry, ...]:
        return self._entries

    @property
    def catch_all(self) -> Tuple[str, ...]:
        """Merged catch-all terms in redaction order."""
        return self._catch_all

    def terms(self, category: Category) -> Tuple[str, ...]:
        """Terms of one category, in declaration order."""
        return self._by_category[Category(category)]

    def category_of(self, term: str) -> Optional[Category]:
        return self._index.get(term.lower())

    def contains_any(self, text: Optional[str]) -> bool:
        """Substring-contains test of the catch-all terms (case-insensitive)."""
        if not text:
            return False
        lowered = text.lower()
        return any(term in lowered for term in self._catch_all)

    def redact(self, text: Optional[str], mask_char: str = "*") -> Optional[str]:
        """
        Mask every whole-word occurrence of a catch-all term.

        Args:
            text: Original text (not lower-cased)
            mask_char: Single masking character

        Returns:
            Text of the same length with each matched term replaced by
            ``mask_char * len(term)``
        """
        if not text:
            return text

        redacted = text
        for term, pattern in self._patterns:
            redacted = pattern.sub(mask_char * len(term), redacted)
        return redacted

    def with_extra_terms(
        self,
        terms: Iterable[str],
        category: Category = Category.GENERAL,
    ) -> "Lexicon":
        """Return a new lexicon that also contains `terms` (always catch-all)."""
        category = Category(category)
        extra = [LexiconEntry(t, category) for t in terms]
        return Lexicon(list(self._entries) + extra)


DEFAULT_LEXICON = Lexicon(_build_default_entries())


def parse_wordlist_line(line: str, default_category: Category) -> Optional[LexiconEntry]:
    """
    Parse one word-list line: ``term`` or ``term,category``.

    Blank lines and ``#`` comments yield None.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    term, _, category = line.partition(",")
    term = term.strip().lower()
    if not term:
        return None

    category = category.strip().lower()
    if not category:
        return LexiconEntry(term, Category(default_category))

    try:
        return LexiconEntry(term, Category(category))
    except ValueError:
        logger.warning(f"Unknown category '{category}' for term '{term}', using {Category(default_category).value}")
        return LexiconEntry(term, Category(default_category))


def load_lexicon(custom_path: str = "", category: str = "general") -> Lexicon:
    """
    Load the lexicon, merging an optional custom word list.

    The custom file has one term per line; a term may carry its category as
    ``term,category``. Lines starting with ``#`` are comments.

    Args:
        custom_path: Optional path to a custom word list file
        category: Category for custom terms that do not name one

    Returns:
        DEFAULT_LEXICON when there is nothing to merge, otherwise a new Lexicon
    """
    if not custom_path:
        logger.info(f"Using default lexicon ({len(DEFAULT_LEXICON)} terms)")
        return DEFAULT_LEXICON

    path = Path(custom_path)
    if not path.exists():
        logger.warning(f"Custom word list not found: {path}, using default")
        return DEFAULT_LEXICON

    default_category = Category(category)
    custom: List[LexiconEntry] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            entry = parse_wordlist_line(line, default_category)
            if entry is None:
                continue
            if entry.term in DEFAULT_LEXICON:
                logger.warning(
                    f"Skipping custom term '{entry.term}': already a default term "
                    f"({DEFAULT_LEXICON.category_of(entry.term).value})"
                )
                continue
            custom.append(entry)

    lexicon = Lexicon(list(DEFAULT_LEXICON.entries) + custom)
    logger.info(f"Loaded lexicon: {len(lexicon)} terms ({len(custom)} custom from {path})")
    return lexicon
