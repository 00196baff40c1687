HOOK_SUFFIXES = (
    "you need to try",
    "that changes everything",
    "to remember today",
    "to post right now",
    "to skyrocket engagement",
    "you can't miss",
    "that blew my mind",
)

EMOJI_SEQUENCE = ("⚡", "🔥", "🚀", "💡", "🎯", "✨", "🎬")

CANONICAL_HASHTAGS = ("#shorts", "#youtubeshorts", "#viral")

FALLBACK_HASHTAGS = ("#contentcreator", "#videotips", "#creatorhub", "#algorithm")

MIN_HASHTAGS = 5
MAX_HASHTAGS = 7

# Placeholder clip ranges used when no transcript window is usable
FALLBACK_TIMESTAMPS = (
    ("00:00", "00:45"),
    ("00:45", "01:30"),
    ("01:30", "02:15"),
)

INSANE_SCORE_THRESHOLD = 90

DESCRIPTION_TEMPLATE = "Highlighting {topic} from {video_title}."
