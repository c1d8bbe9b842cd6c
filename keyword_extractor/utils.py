import html
import re
from typing import Dict, Iterable, List

from config import HIGHLIGHT_MARKER, STOP_WORDS

# Anything that is not an ASCII letter/digit separates tokens (input is lowercased first)
TOKEN_SPLIT_RE = re.compile(r"[^a-z0-9]+")
TAG_RE = re.compile(r"<[^>]+>")
SCRIPT_RE = re.compile(r"<(script|style)\b.*?</\1\s*>", flags=re.I | re.S)
WS_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    if not text: return ""
    return WS_RE.sub(" ", text).strip()


def strip_html(markup: str) -> str:
    if not markup: return ""
    out = SCRIPT_RE.sub(" ", str(markup))
    out = TAG_RE.sub(" ", out)
    return normalize_whitespace(html.unescape(out))


def tokenize(text: str) -> List[str]:
    if not text: return []
    return [t for t in TOKEN_SPLIT_RE.split(text.lower()) if t]


def count_terms(text: str, stop_words: Iterable[str] = STOP_WORDS) -> Dict[str, int]:
    """Frequency of every non-stop-word token, keyed in first-occurrence order."""
    freq = {}
    for tok in tokenize(text):
        if tok in stop_words: continue
        freq[tok] = freq.get(tok, 0) + 1
    return freq


def top_terms(freq: Dict[str, int], limit: int) -> List[str]:
    # sorted() is stable, so equal counts keep first-occurrence order
    if limit <= 0 or not freq: return []
    return [t for t, _ in sorted(freq.items(), key=lambda x: x[1], reverse=True)[:limit]]


def extract_keywords(text: str, n: int) -> List[str]:
    return top_terms(count_terms(text), n)


def keyword_pattern(keywords: List[str]) -> "re.Pattern":
    alternation = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"\b(?:{alternation})\b", flags=re.I | re.A)


def highlight(text: str, keywords: List[str]) -> str:
    """
    Wrap every whole-word, case-insensitive occurrence of a keyword in
    HIGHLIGHT_MARKER. The matched text is kept as written, so "Cat" stays "Cat".
    """
    if not keywords: return text
    mark = HIGHLIGHT_MARKER
    return keyword_pattern(keywords).sub(lambda m: f"{mark}{m.group(0)}{mark}", text)
