import re
from typing import Iterable, List, Optional

from shorts_core.intelligence.models import CandidateSegment, GenerationContext
from shorts_core.packaging.models import ShortsIdea
from shorts_core.packaging.phrases import (
    CANONICAL_HASHTAGS,
    DESCRIPTION_TEMPLATE,
    EMOJI_SEQUENCE,
    FALLBACK_HASHTAGS,
    HOOK_SUFFIXES,
    INSANE_SCORE_THRESHOLD,
    MAX_HASHTAGS,
    MIN_HASHTAGS,
)
from shorts_core.utils.text_utils import extract_keywords, extract_sentences, format_timestamp, title_case

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def format_clip_time(start: float, end: float) -> str:
    return f"{format_timestamp(start)}-{format_timestamp(end)}"


def format_hashtags(keywords: Iterable[str]) -> List[str]:
    """
    Builds the hashtag list: canonical tags first, then one tag per keyword,
    padded with generic tags up to MIN_HASHTAGS and cut at MAX_HASHTAGS.
    """
    # dict keeps insertion order and collapses duplicates
    tags = dict.fromkeys(CANONICAL_HASHTAGS)
    for keyword in keywords:
        cleaned = _NON_ALNUM_RE.sub("", keyword.lower())
        if cleaned:
            tags.setdefault(f"#{cleaned}")

    for fallback in FALLBACK_HASHTAGS:
        if len(tags) >= MIN_HASHTAGS:
            break
        tags.setdefault(fallback)

    return list(tags)[:MAX_HASHTAGS]


def build_caption(sentences: Iterable[str]) -> str:
    return "\n".join(
        f"{EMOJI_SEQUENCE[index % len(EMOJI_SEQUENCE)]} {sentence}" for index, sentence in enumerate(sentences)
    )


def build_title(segment: CandidateSegment, context: GenerationContext) -> str:
    keywords = segment.keywords or extract_keywords(segment.text, 4)
    title_words = context.video_title.split()
    if keywords:
        prime_keyword = keywords[0]
    elif title_words:
        prime_keyword = title_words[0]
    else:
        prime_keyword = "Clip"

    hook_suffix = HOOK_SUFFIXES[int(segment.score) % len(HOOK_SUFFIXES)]
    lead_word = "Insane" if segment.score > INSANE_SCORE_THRESHOLD else "Must-See"
    return f"{lead_word} {title_case(f'{prime_keyword} {hook_suffix}')}"


def build_description(segment: CandidateSegment, context: GenerationContext) -> str:
    sentences = extract_sentences(segment.text, 2)
    if len(sentences) >= 2:
        return " ".join(sentences[:2])
    topic = segment.keywords[0] if segment.keywords else context.video_title
    return DESCRIPTION_TEMPLATE.format(topic=topic, video_title=context.video_title)


def segment_to_idea(
    segment: CandidateSegment, context: GenerationContext, clip_time: Optional[str] = None
) -> ShortsIdea:
    """Turns a scored segment into a title, description, hashtags and captions."""
    return ShortsIdea(
        clip_time=clip_time or format_clip_time(segment.start, segment.end),
        title=build_title(segment, context),
        description=build_description(segment, context),
        hashtags=format_hashtags(segment.keywords),
        captions=build_caption(extract_sentences(segment.text, 3)),
    )
