from typing import List, Union

from loguru import logger

from shorts_core.config_manager import ConfigManager
from shorts_core.exceptions import ChannelLookupError, IdeaEngineError, NoIdeasError, UnrecognizedLinkError
from shorts_core.ingestion.metadata import VideoMetadataFetcher
from shorts_core.ingestion.models import ChannelIdKind
from shorts_core.intelligence.curator import SegmentCurator
from shorts_core.intelligence.models import GenerationContext
from shorts_core.packaging.fallback import build_fallback_ideas
from shorts_core.packaging.generator import segment_to_idea
from shorts_core.packaging.models import ChannelIdeasResult, ShortsIdea, VideoIdeasResult
from shorts_core.transcription.fetcher import TranscriptFetcher
from shorts_core.utils.url_parser import extract_channel_payload, extract_video_id


class IdeaPipeline:
    def __init__(self, config_manager: ConfigManager):
        self.cfg = config_manager
        self.metadata = VideoMetadataFetcher(config_manager)
        self.transcripts = TranscriptFetcher(config_manager)
        self.curator = SegmentCurator(config_manager)

    def generate_ideas_for_video(self, video_id: str) -> VideoIdeasResult:
        """
        Fetches metadata, then the transcript, and turns the best transcript
        windows into ideas. Falls back to description-based ideas when there
        is no transcript or no window fits the clip bounds.
        """
        logger.info(f"Generating ideas for video {video_id}")
        details = self.metadata.fetch(video_id)
        transcript = self.transcripts.fetch(video_id)
        context = GenerationContext(
            video_id=video_id,
            video_title=details.title,
            channel_name=details.channel_name,
        )
        packaging = self.cfg.packaging

        ideas: List[ShortsIdea]
        if not transcript:
            logger.warning(f"No transcript for {video_id}. Using description fallback.")
            ideas = build_fallback_ideas(context, details.description, packaging.fallback_keywords)
        else:
            segments = self.curator.curate(transcript)
            if segments:
                ideas = [segment_to_idea(s, context) for s in segments[: packaging.ideas_per_video]]
            else:
                logger.warning(f"No transcript window fits clip bounds for {video_id}. Using transcript text.")
                transcript_text = " ".join(fragment.text for fragment in transcript)
                ideas = build_fallback_ideas(context, transcript_text, packaging.fallback_keywords)

        logger.success(f"Generated {len(ideas)} ideas for '{details.title}'")
        return VideoIdeasResult(
            video_id=video_id,
            video_title=details.title,
            channel_name=details.channel_name,
            ideas=ideas,
        )

    def generate_ideas_for_channel(self, channel_id: str, kind: ChannelIdKind) -> ChannelIdeasResult:
        """
        Runs the video pipeline over the channel's first videos and keeps
        the best idea of each video that produced any.
        """
        listing = self.metadata.list_channel_videos(channel_id, kind)
        if listing.alert_message:
            raise ChannelLookupError(listing.alert_message)

        channel_name = listing.channel_name or "Channel"
        results: List[VideoIdeasResult] = []

        for video in listing.videos[: self.cfg.ingestion.channel_video_limit]:
            try:
                result = self.generate_ideas_for_video(video.video_id)
            except IdeaEngineError as e:
                logger.warning(f"Skipping video {video.video_id}: {e}")
                continue

            if result.ideas:
                results.append(result)
            else:
                logger.warning(f"Video {video.video_id} produced no ideas. Skipping.")

        if not results:
            raise NoIdeasError("Unable to generate ideas for this channel right now.")

        ideas = [result.ideas[0] for result in results][: self.cfg.packaging.ideas_per_channel]
        return ChannelIdeasResult(channel_name=channel_name, ideas=ideas, videos=results)

    def generate_for_link(self, url: str) -> Union[VideoIdeasResult, ChannelIdeasResult]:
        """Dispatches a pasted link to the video or channel flow."""
        video_id = extract_video_id(url)
        if video_id:
            return self.generate_ideas_for_video(video_id)

        channel = extract_channel_payload(url)
        if channel:
            channel_id, kind = channel
            return self.generate_ideas_for_channel(channel_id, kind)

        raise UnrecognizedLinkError(
            "Unable to recognize this YouTube link. Please paste a full video or channel URL."
        )
