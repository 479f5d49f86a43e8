"""Text normalization and tokenization for lexical retrieval.

Thai has no spaces between words, so tokenization is a pragmatic split:
keep ASCII alphanumerics and the Thai block, split on whitespace.
"""

import re
import unicodedata

MAX_QUERY_TOKENS = 64

_WHITESPACE = re.compile(r"\s+")
_NON_TOKEN = re.compile(r"[^0-9a-z\u0E00-\u0E7F\s]+")


def normalize(text: str) -> str:
    """NFKC-normalize, lowercase and collapse whitespace.

    Args:
        text: Raw text

    Returns:
        Normalized text
    """
    return _WHITESPACE.sub(" ", unicodedata.normalize("NFKC", text).lower()).strip()


def tokenize(text: str) -> list[str]:
    """Split text into at most ``MAX_QUERY_TOKENS`` lexical tokens.

    Args:
        text: Raw query text

    Returns:
        Tokens in query order
    """
    cleaned = _NON_TOKEN.sub(" ", normalize(text))
    return [tok for tok in cleaned.split(" ") if tok][:MAX_QUERY_TOKENS]
