import pytest
from fastapi.testclient import TestClient

from backend.server import app
from shorts_core.exceptions import NoIdeasError, UnrecognizedLinkError
from shorts_core.packaging.models import ChannelIdeasResult, ShortsIdea, VideoIdeasResult

client = TestClient(app)


@pytest.fixture
def sample_idea():
    return ShortsIdea(
        clip_time="00:10-00:55",
        title="Must-See Oak You Need To Try",
        description="Sanding oak. Staining oak.",
        hashtags=["#shorts", "#youtubeshorts", "#viral", "#oak", "#contentcreator"],
        captions="⚡ Sanding oak.\n🔥 Staining oak.",
    )


@pytest.fixture
def mock_pipeline(mocker):
    # Patch the IdeaPipeline in server module
    return mocker.patch("backend.server.IdeaPipeline").return_value


def test_generate_video(mock_pipeline, sample_idea):
    mock_pipeline.generate_for_link.return_value = VideoIdeasResult(
        video_id="vid1", video_title="Oak Desk", channel_name="Maker Lab", ideas=[sample_idea]
    )

    response = client.post("/generate", json={"url": "https://youtu.be/vid1"})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "video"
    assert body["videoId"] == "vid1"
    assert body["videoTitle"] == "Oak Desk"
    assert body["channelName"] == "Maker Lab"
    assert body["ideas"][0]["clipTime"] == "00:10-00:55"
    mock_pipeline.generate_for_link.assert_called_once_with("https://youtu.be/vid1")


def test_generate_channel(mock_pipeline, sample_idea):
    video = VideoIdeasResult(video_id="vid1", video_title="Oak Desk", ideas=[sample_idea])
    mock_pipeline.generate_for_link.return_value = ChannelIdeasResult(
        channel_name="Maker Lab", ideas=[sample_idea], videos=[video]
    )

    response = client.post("/generate", json={"url": "https://www.youtube.com/@makerlab"})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "channel"
    assert body["channelName"] == "Maker Lab"
    assert body["videos"] == [{"videoId": "vid1", "videoTitle": "Oak Desk"}]
    assert len(body["ideas"]) == 1


def test_generate_missing_url():
    response = client.post("/generate", json={})
    assert response.status_code == 400
    assert "Please include" in response.json()["detail"]


def test_generate_unrecognized_link(mock_pipeline):
    mock_pipeline.generate_for_link.side_effect = UnrecognizedLinkError("Unable to recognize this YouTube link.")

    response = client.post("/generate", json={"url": "https://example.com"})

    assert response.status_code == 400
    assert "Unable to recognize" in response.json()["detail"]


def test_generate_engine_failure(mock_pipeline):
    mock_pipeline.generate_for_link.side_effect = NoIdeasError("nothing")

    response = client.post("/generate", json={"url": "https://www.youtube.com/@quiet"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate ideas. Please try again."


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_settings():
    response = client.get("/settings")
    assert response.status_code == 200
    assert response.json()["segmentation"]["window_min_seconds"] == 30
