from typing import List

from loguru import logger

from shorts_core.intelligence.models import CandidateSegment, GenerationContext
from shorts_core.packaging.generator import segment_to_idea
from shorts_core.packaging.models import ShortsIdea
from shorts_core.packaging.phrases import FALLBACK_TIMESTAMPS
from shorts_core.utils.text_utils import extract_keywords, extract_sentences, sanitize_text

SENTENCES_PER_IDEA = 2
FALLBACK_BASE_SCORE = 60
FALLBACK_SCORE_STEP = 5


def build_fallback_ideas(context: GenerationContext, source_text: str, keyword_count: int = 5) -> List[ShortsIdea]:
    """
    Synthesizes one idea per placeholder clip range from free text
    (the video description, or the raw transcript when no window survived).

    Returns an empty list when the source text is blank.
    """
    source = sanitize_text(source_text)
    if not source:
        logger.warning(f"No text to build fallback ideas for {context.video_id}")
        return []

    sentences = extract_sentences(source, len(FALLBACK_TIMESTAMPS) * SENTENCES_PER_IDEA)
    ideas: List[ShortsIdea] = []

    for index, (clip_start, clip_end) in enumerate(FALLBACK_TIMESTAMPS):
        chunk = " ".join(sentences[index * SENTENCES_PER_IDEA : (index + 1) * SENTENCES_PER_IDEA])
        text = chunk or source
        segment = CandidateSegment(
            start=0,
            end=45,
            text=text,
            keywords=extract_keywords(text, keyword_count),
            score=FALLBACK_BASE_SCORE + FALLBACK_SCORE_STEP * index,
        )
        ideas.append(segment_to_idea(segment, context, clip_time=f"{clip_start}-{clip_end}"))

    logger.info(f"Built {len(ideas)} fallback ideas for {context.video_id}")
    return ideas
