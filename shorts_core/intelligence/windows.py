from typing import List, Optional, Sequence

from shorts_core.config_manager import SegmentationConfig
from shorts_core.intelligence.models import CandidateSegment
from shorts_core.intelligence.scoring import score_text
from shorts_core.transcription.models import TimedFragment
from shorts_core.utils.text_utils import extract_keywords, sanitize_text


def _make_candidate(fragments: Sequence[TimedFragment], keyword_count: int) -> CandidateSegment:
    text = sanitize_text(" ".join(f.text for f in fragments))
    start = fragments[0].offset
    end = fragments[-1].offset + fragments[-1].duration
    return CandidateSegment(
        start=start,
        end=end,
        text=text,
        keywords=extract_keywords(text, keyword_count),
        score=score_text(text, end - start),
    )


def build_candidate_windows(
    fragments: Sequence[TimedFragment], cfg: Optional[SegmentationConfig] = None
) -> List[CandidateSegment]:
    """
    Slides a variable-length window over the fragment list.

    For every start index the end cursor is first pushed until the window
    holds at least `window_min_seconds` of speech. From there a second
    cursor keeps growing the window, emitting one candidate per end
    position, until the fragments run out or the next fragment would take
    the window past `window_max_seconds + growth_slack_seconds`.

    Candidates overlap on purpose; ranking picks the best length per start.
    """
    cfg = cfg or SegmentationConfig()
    candidates: List[CandidateSegment] = []
    total = len(fragments)

    start_index = 0
    end_index = 0
    duration_sum = 0.0

    while start_index < total:
        while end_index < total and duration_sum < cfg.window_min_seconds:
            duration_sum += fragments[end_index].duration
            end_index += 1

        if duration_sum >= cfg.window_min_seconds:
            candidate_end = end_index
            candidate_duration = duration_sum
            while True:
                window = fragments[start_index:candidate_end]
                candidates.append(_make_candidate(window, cfg.keywords_per_segment))

                if candidate_end >= total:
                    break
                next_duration = fragments[candidate_end].duration
                if candidate_duration + next_duration > cfg.growth_limit_seconds:
                    break
                candidate_duration += next_duration
                candidate_end += 1

        duration_sum -= fragments[start_index].duration
        start_index += 1

    return candidates
