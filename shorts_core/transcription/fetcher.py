from typing import List

from loguru import logger
from youtube_transcript_api import NoTranscriptFound, TranscriptsDisabled, VideoUnavailable, YouTubeTranscriptApi

from shorts_core.config_manager import ConfigManager, IngestionConfig
from shorts_core.transcription.models import TimedFragment


class TranscriptFetcher:
    def __init__(self, config_manager: ConfigManager):
        self.cfg: IngestionConfig = config_manager.ingestion
        self.api = YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> List[TimedFragment]:
        """
        Fetches the caption track of a video as timed fragments.
        Any failure is treated as "no transcript" and yields an empty list.
        """
        try:
            snippets = self.api.fetch(video_id, languages=self.cfg.transcript_languages)
        except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
            logger.warning(f"Transcript unavailable for {video_id}: {e}")
            return []
        except Exception as e:
            logger.error(f"Transcript fetch failed for {video_id}: {e}")
            return []

        fragments = [
            TimedFragment(text=snippet.text, offset=snippet.start, duration=snippet.duration)
            for snippet in snippets
        ]
        logger.debug(f"Fetched {len(fragments)} transcript fragments for {video_id}")
        return fragments
