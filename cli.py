import argparse
import json
import sys

from loguru import logger

from shorts_core.config_manager import ConfigManager
from shorts_core.exceptions import IdeaEngineError
from shorts_core.packaging.models import ChannelIdeasResult, ShortsIdea
from shorts_core.pipeline import IdeaPipeline
from shorts_core.utils.logger import setup_logger


def print_idea(index: int, idea: ShortsIdea) -> None:
    print(f"\n[{index}] {idea.title}  ({idea.clip_time})")
    print(f"    {idea.description}")
    print(f"    {' '.join(idea.hashtags)}")
    for line in idea.captions.splitlines():
        print(f"    {line}")


def main():
    parser = argparse.ArgumentParser(description="Shorts Idea Engine CLI")
    parser.add_argument("--config", default="config/settings.yaml", help="Path to settings YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Suggest Shorts clips for a video or channel link")
    generate_parser.add_argument("url", help="YouTube video or channel URL")
    generate_parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    generate_parser.add_argument("--log-level", default=None, help="Console log level (overrides settings.yaml)")

    args = parser.parse_args()

    try:
        config = ConfigManager(config_path=args.config)
    except FileNotFoundError as e:
        print(f"Config Error: {e}")
        sys.exit(1)

    setup_logger(config.paths.log_dir, config.logging, level=args.log_level)

    if args.command == "generate":
        pipeline = IdeaPipeline(config)
        try:
            result = pipeline.generate_for_link(args.url)
        except IdeaEngineError as e:
            logger.error(f"Idea generation failed: {e}")
            print(f"Error: {e}")
            sys.exit(1)

        if args.json:
            print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
            return

        if isinstance(result, ChannelIdeasResult):
            print(f"Channel: {result.channel_name} ({len(result.videos)} videos)")
        else:
            print(f"Video: {result.video_title} by {result.channel_name}")

        if not result.ideas:
            print("No ideas could be generated for this link.")
        for i, idea in enumerate(result.ideas, start=1):
            print_idea(i, idea)


if __name__ == "__main__":
    main()
