class IdeaEngineError(Exception):
    """Base class for errors surfaced to callers of the idea pipeline."""


class VideoLookupError(IdeaEngineError):
    """Video metadata could not be retrieved."""


class ChannelLookupError(IdeaEngineError):
    """The channel listing returned an alert or could not be read."""


class NoIdeasError(IdeaEngineError):
    """No video in a channel batch produced any idea."""


class UnrecognizedLinkError(IdeaEngineError):
    """A link is neither a video link nor a channel link."""
