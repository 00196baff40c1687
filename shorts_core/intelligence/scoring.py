import re

from shorts_core.utils.text_utils import sanitize_text

POWER_WORDS = (
    "secret",
    "ultimate",
    "powerful",
    "unbelievable",
    "surprising",
    "hack",
    "tip",
    "moment",
    "insane",
    "crazy",
    "wild",
    "perfect",
    "epic",
    "biggest",
    "smart",
    "hidden",
    "formula",
    "lesson",
    "boost",
    "master",
    "level",
    "viral",
)

TARGET_DURATION_SECONDS = 45
DURATION_CEILING_SECONDS = 60
DURATION_WEIGHT = 0.8
POWER_WORD_BONUS = 12
EXCITEMENT_BONUS = 3
EMPHASIS_BONUS = 4

_TOKEN_RE = re.compile(r"[a-z0-9]+")
_EXCITEMENT_RE = re.compile(r"[!?]")
_EMPHASIS_RE = re.compile(r"\b[A-Z]{3,}\b")


def score_text(text: str, duration: float) -> float:
    """
    Scores a window of transcript text for short-form appeal.

    The score adds the word count, a closeness-to-45s term, a bonus per
    distinct power word, a bonus per "!" or "?", and a bonus per all-caps
    word of three letters or more.
    """
    lowered = sanitize_text(text).lower()

    score: float = len(lowered.split())
    score += (DURATION_CEILING_SECONDS - abs(duration - TARGET_DURATION_SECONDS)) * DURATION_WEIGHT

    tokens = set(_TOKEN_RE.findall(lowered))
    score += POWER_WORD_BONUS * sum(1 for word in POWER_WORDS if word in tokens)

    score += EXCITEMENT_BONUS * len(_EXCITEMENT_RE.findall(text))
    score += EMPHASIS_BONUS * len(_EMPHASIS_RE.findall(text))

    return score
