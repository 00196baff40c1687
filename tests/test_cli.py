import json

import pytest

import cli
from shorts_core.exceptions import NoIdeasError
from shorts_core.packaging.models import ShortsIdea, VideoIdeasResult


@pytest.fixture
def mock_runtime(mocker):
    mocker.patch("cli.ConfigManager")
    mocker.patch("cli.setup_logger")
    return mocker.patch("cli.IdeaPipeline").return_value


@pytest.fixture
def video_result():
    idea = ShortsIdea(
        clip_time="00:00-00:45",
        title="Must-See Oak You Need To Try",
        description="Sanding oak. Staining oak.",
        hashtags=["#shorts", "#youtubeshorts", "#viral", "#oak", "#contentcreator"],
        captions="⚡ Sanding oak.\n🔥 Staining oak.",
    )
    return VideoIdeasResult(video_id="vid1", video_title="Oak Desk", channel_name="Maker Lab", ideas=[idea])


def test_generate_prints_ideas(mocker, capsys, mock_runtime, video_result):
    mock_runtime.generate_for_link.return_value = video_result
    mocker.patch("sys.argv", ["cli.py", "generate", "https://youtu.be/vid1"])

    cli.main()

    out = capsys.readouterr().out
    assert "Video: Oak Desk by Maker Lab" in out
    assert "Must-See Oak You Need To Try" in out
    assert "🔥 Staining oak." in out


def test_generate_json(mocker, capsys, mock_runtime, video_result):
    mock_runtime.generate_for_link.return_value = video_result
    mocker.patch("sys.argv", ["cli.py", "generate", "https://youtu.be/vid1", "--json"])

    cli.main()

    body = json.loads(capsys.readouterr().out)
    assert body["videoId"] == "vid1"
    assert body["ideas"][0]["clipTime"] == "00:00-00:45"


def test_generate_failure_exits(mocker, mock_runtime):
    mock_runtime.generate_for_link.side_effect = NoIdeasError("nothing to suggest")
    mocker.patch("sys.argv", ["cli.py", "generate", "https://www.youtube.com/@quiet"])

    with pytest.raises(SystemExit) as exc:
        cli.main()
    assert exc.value.code == 1


def test_logging_settings_reach_logger(mocker, mock_runtime, video_result):
    config_cls = mocker.patch("cli.ConfigManager")
    setup = mocker.patch("cli.setup_logger")
    mock_runtime.generate_for_link.return_value = video_result
    mocker.patch("sys.argv", ["cli.py", "generate", "https://youtu.be/vid1", "--log-level", "DEBUG"])

    cli.main()

    config = config_cls.return_value
    setup.assert_called_once_with(config.paths.log_dir, config.logging, level="DEBUG")
