"""
Core product name extraction.

Source catalogs encode format, roast, origin and size in the display name
("Ethiopian Light Roast - Whole Bean"). The core name is what remains after
stripping those trailing qualifiers; products sharing a core name are
candidates for one family.

Stripping is an ordered list of independent suffix rules applied once each:
format, roast, origin, size, then parenthetical annotations.
"""
from dataclasses import dataclass
from functools import lru_cache
import re
from typing import List, Optional, Pattern

# Separator characters that may sit between a name and its qualifier
_SEP = r"[\s\-\u2013\u2014,:/|]*"
_HARD_SEP = r"(?:\s*[\-\u2013\u2014,:/|]\s*)"
_EDGE_JUNK = re.compile(r"^[\s\-\u2013\u2014,:/|]+|[\s\-\u2013\u2014,:/|]+$")

ORIGIN_NAMES: List[str] = [
    "Papua New Guinea", "Costa Rica", "Costa Rican", "El Salvador", "Blue Mountain",
    "Brazil", "Brazilian", "Colombia", "Colombian", "Ethiopia", "Ethiopian",
    "Guatemala", "Guatemalan", "Honduras", "Honduran", "Kenya", "Kenyan",
    "Sumatra", "Sumatran", "Java", "Peru", "Peruvian", "Mexico", "Mexican",
    "Nicaragua", "Nicaraguan", "Rwanda", "Burundi", "Tanzania", "Uganda",
    "Yemen", "Panama", "Indonesia", "Vietnam", "India", "Hawaii", "Kona",
    "Jamaica", "Yirgacheffe", "Sidamo", "Huila", "Antigua",
]
_ORIGIN = "|".join(re.escape(name) for name in ORIGIN_NAMES)


@dataclass(frozen=True)
class SuffixRule:
    """
    One trailing-qualifier rule of the core name pipeline.
    """
    name: str
    pattern: Pattern

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def strip(self, text: str) -> str:
        """
        Remove one trailing match, unless that would leave nothing behind.

        Args:
            text (str): Name being reduced

        Returns:
            str: Name without the trailing qualifier
        """
        match = self.pattern.search(text)
        if match is None:
            return text
        remainder = text[:match.start()]
        if not _EDGE_JUNK.sub("", remainder):
            return text
        return remainder


FORMAT_RULE = SuffixRule(
    "format",
    re.compile(rf"{_SEP}\(?\b(?:whole[\s\-]*beans?|ground|k-?cups?|pods?|instant)\)?\s*$", re.IGNORECASE),
)
ROAST_RULE = SuffixRule(
    "roast",
    re.compile(rf"{_SEP}\(?\b(?:medium[\s\-]*dark|light|medium|dark)(?:\s+roast)?\)?\s*$", re.IGNORECASE),
)
# Case-sensitive: origins are capitalized words after an explicit separator
ORIGIN_RULE = SuffixRule(
    "origin",
    re.compile(rf"{_HARD_SEP}(?:{_ORIGIN})(?:(?:\s*[&/,]\s*|\s+and\s+|\s+)(?:{_ORIGIN}))*\s*$"),
)
SIZE_RULE = SuffixRule(
    "size",
    re.compile(
        rf"{_SEP}\(?\b\d+(?:\.\d+)?\s*-?\s*(?:oz|ounces?|lbs?|pounds?|g|grams?|kg|ct|count|pack|pk)\b\.?\)?\s*$",
        re.IGNORECASE,
    ),
)
PARENTHETICAL_RULE = SuffixRule(
    "parenthetical",
    re.compile(r"\s*\([^()]*\)\s*$"),
)

CORE_NAME_RULES: List[SuffixRule] = [FORMAT_RULE, ROAST_RULE, ORIGIN_RULE, SIZE_RULE, PARENTHETICAL_RULE]


@lru_cache(maxsize=2048)
def extract_core_product_name(product_name: Optional[str]) -> str:
    """
    Strip trailing format, roast, origin, size and parenthetical qualifiers.

    Each rule removes at most one trailing match, in that fixed order.

    Args:
        product_name (Optional[str]): Display name

    Returns:
        str: Core name with dangling separators trimmed

    Examples:
        >>> extract_core_product_name("Ethiopian Light Roast - Whole Bean")
        'Ethiopian'
        >>> extract_core_product_name("Morning Blend (Limited) 12oz")
        'Morning Blend'
    """
    name = re.sub(r"\s+", " ", (product_name or "").strip())
    for rule in CORE_NAME_RULES:
        name = rule.strip(name)
    return _EDGE_JUNK.sub("", name)


def family_match_key(product_name: Optional[str]) -> str:
    """Case-insensitive grouping key derived from the core name."""
    return extract_core_product_name(product_name).casefold()
