import re
from collections import Counter
from typing import List

STOP_WORDS = frozenset(
    {
        "the", "and", "for", "that", "with", "have", "this", "from", "your",
        "about", "just", "into", "there", "their", "what", "when", "where",
        "which", "would", "could", "should", "really", "https", "video",
        "youtube", "shorts", "youre", "theyre", "cant", "wont", "its", "dont",
        "doesnt", "ive", "were", "was", "them", "because", "while", "will",
        "been", "than", "then", "only", "over", "other", "ever", "even",
        "make", "made", "some", "more", "most", "also", "like", "know", "want",
    }
)

_WHITESPACE_RE = re.compile(r"\s+")
_ANNOTATION_RE = re.compile(r"\[[^\]]*\]")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
_CLAUSE_BOUNDARY_RE = re.compile(r",\s+")
_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")


def sanitize_text(raw: str) -> str:
    """Removes [bracketed] annotations and collapses whitespace."""
    without_annotations = _ANNOTATION_RE.sub("", raw)
    return _WHITESPACE_RE.sub(" ", without_annotations).strip()


def extract_sentences(text: str, limit: int = 3) -> List[str]:
    """
    Splits text into at most `limit` sentence-like units.

    When the text holds fewer sentences than requested, comma clauses of the
    existing sentences are appended (in source order) to fill the list.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    cleaned = sanitize_text(text)
    sentences = [s.strip() for s in _SENTENCE_BOUNDARY_RE.split(cleaned) if s.strip()]

    if len(sentences) >= limit:
        return sentences[:limit]

    if not sentences:
        return [cleaned] if cleaned else []

    supplemental: List[str] = []
    for sentence in sentences:
        if len(sentences) + len(supplemental) >= limit:
            break
        # A sentence without a comma boundary yields itself as its only clause
        clauses = [c.strip() for c in _CLAUSE_BOUNDARY_RE.split(sentence) if c.strip()]
        for clause in clauses:
            if len(sentences) + len(supplemental) < limit:
                supplemental.append(clause)

    return (sentences + supplemental)[:limit]


def extract_keywords(text: str, max_keywords: int = 6) -> List[str]:
    """
    Returns up to `max_keywords` distinct tokens by descending frequency.
    Equal counts keep the order in which the tokens first appear.
    """
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    counts = Counter(w for w in words if len(w) > 2 and w not in STOP_WORDS)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:max_keywords]]


def title_case(text: str) -> str:
    # Only the first letter is touched; "can't" must not become "Can'T"
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def format_timestamp(seconds: float) -> str:
    safe_seconds = max(0, int(seconds))
    minutes, secs = divmod(safe_seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
