import logging
from typing import Any, Dict

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel

from shorts_core.config_manager import ConfigManager
from shorts_core.exceptions import UnrecognizedLinkError
from shorts_core.packaging.models import ChannelIdeasResult
from shorts_core.pipeline import IdeaPipeline

load_dotenv()


# uvicorn and fastapi log through stdlib logging; forward those records to loguru
class InterceptHandler(logging.Handler):
    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so loguru reports the real call site
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
logging.getLogger("uvicorn").handlers = [InterceptHandler()]
logging.getLogger("uvicorn.access").handlers = [InterceptHandler()]

app = FastAPI(title="Shorts Idea Engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GenerateRequest(BaseModel):
    url: str = ""


def load_config() -> ConfigManager:
    try:
        return ConfigManager()
    except FileNotFoundError as e:
        logger.warning(f"{e}. Using default settings.")
        return ConfigManager.from_defaults()


# Declared sync so FastAPI runs the blocking pipeline in its threadpool
@app.post("/generate")
def generate(request: GenerateRequest) -> Dict[str, Any]:
    url = request.url.strip()
    if not url:
        raise HTTPException(status_code=400, detail="Please include a YouTube video or channel link.")

    pipeline = IdeaPipeline(load_config())
    try:
        result = pipeline.generate_for_link(url)
    except UnrecognizedLinkError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Idea generation failed for {url}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate ideas. Please try again.") from e

    if isinstance(result, ChannelIdeasResult):
        return {
            "type": "channel",
            "channelName": result.channel_name,
            "ideas": [idea.model_dump(by_alias=True) for idea in result.ideas],
            "videos": [{"videoId": v.video_id, "videoTitle": v.video_title} for v in result.videos],
        }

    return {"type": "video", **result.model_dump(by_alias=True)}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.get("/settings")
async def get_settings():
    return load_config().config.model_dump()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
