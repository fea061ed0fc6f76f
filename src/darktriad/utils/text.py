"""Text processing utilities: normalization, tokenization and n-grams."""

import re
import unicodedata
from typing import List

# Order matters: earlier alternatives win over later ones at the same position.
_TOKEN_PATTERNS = [
    # URLs
    r"(?:https?://|www\.)[^\s<>\"]+",
    # Emoticons, e.g. :-) ;p 8) (: <3, never joined to a word
    r"(?<!\w)[<>]?[:;=][\-o\*\']?[\)\]\(\[dDpP/\:\}\{@\|\\](?!\w)",
    r"(?<!\w)8[\-o\*\']?[\)\(](?!\w)",
    r"(?<!\w)[\)\]\(\[/\:\}\{@\|\\][\-o\*\']?[:;=][<>]?(?!\w)",
    r"(?<!\w)<3(?!\w)",
    # Twitter handles and hashtags
    r"@[\w_]+",
    r"\#+[\w_]+[\w\'_\-]*[\w_]+",
    # Words, with apostrophes and hyphens kept inside
    r"[^\W_]+(?:['’\-][^\W_]+)*",
]

_TOKEN_RE = re.compile("|".join(f"(?:{p})" for p in _TOKEN_PATTERNS), re.UNICODE)


def normalize_text(text: str) -> str:
    """
    Clean and normalize text before tokenization.

    Args:
        text: Raw text to clean

    Returns:
        Lower-cased text with normalized unicode and whitespace
    """
    if not text:
        return ""

    # Normalize unicode characters
    text = unicodedata.normalize("NFKC", text)

    # Remove control characters except whitespace
    text = "".join(
        char for char in text if unicodedata.category(char)[0] != "C" or char in "\n\t"
    )

    text = re.sub(r"\s+", " ", text)

    return text.lower().strip()


def tokenize(text: str) -> List[str]:
    """
    Split text into lower-cased tokens.

    Words, contractions, hyphenated words, URLs, emoticons, @handles and
    #hashtags each count as one token. Bare punctuation is discarded, so a
    string of punctuation yields an empty list.

    Args:
        text: Text to tokenize

    Returns:
        List of tokens in order of appearance
    """
    if not text:
        return []

    return [match.group(0).lower() for match in _TOKEN_RE.finditer(text)]


def ngrams(text: str, n: int) -> List[str]:
    """
    Build the contiguous n-token spans of a string.

    Args:
        text: Text to tokenize and window over
        n: Window size

    Returns:
        List of n-grams, each the window's tokens joined by a single space.
        Empty if n < 1 or the text has fewer than n tokens.
    """
    if n < 1:
        return []

    tokens = tokenize(text)
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]
