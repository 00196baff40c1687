from typing import List, Optional, Sequence

from loguru import logger

from shorts_core.config_manager import ConfigManager, SegmentationConfig
from shorts_core.intelligence.models import CandidateSegment
from shorts_core.intelligence.windows import build_candidate_windows
from shorts_core.transcription.models import TimedFragment


def select_segments(
    candidates: Sequence[CandidateSegment], cfg: Optional[SegmentationConfig] = None
) -> List[CandidateSegment]:
    """Keeps clip-length candidates and returns the best scoring ones first."""
    cfg = cfg or SegmentationConfig()
    in_bounds = [c for c in candidates if cfg.min_clip_seconds <= c.duration <= cfg.max_clip_seconds]
    # sorted() is stable, equal scores keep discovery order
    ranked = sorted(in_bounds, key=lambda c: c.score, reverse=True)
    return ranked[: cfg.max_candidates]


class SegmentCurator:
    def __init__(self, config_manager: ConfigManager):
        self.cfg: SegmentationConfig = config_manager.segmentation

    def curate(self, fragments: Sequence[TimedFragment]) -> List[CandidateSegment]:
        """
        Builds every candidate window of the transcript and returns the
        ranked selection. An empty result means the caller must fall back.
        """
        if not fragments:
            return []

        candidates = build_candidate_windows(fragments, self.cfg)
        selected = select_segments(candidates, self.cfg)
        logger.info(f"Selected {len(selected)} segments (from {len(candidates)} raw windows).")
        if selected:
            logger.debug(f"Top segment {selected[0].start:.1f}-{selected[0].end:.1f}s scored {selected[0].score:.1f}")
        return selected
