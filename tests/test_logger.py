from shorts_core.config_manager import LoggingConfig
from shorts_core.utils.logger import setup_logger


def test_setup_logger_uses_configured_stem(tmp_path):
    log_dir = tmp_path / "logs"

    log = setup_logger(str(log_dir), LoggingConfig(file_stem="ideas"))
    log.info("sink check")

    assert "sink check" in (log_dir / "ideas.log").read_text()
    assert "sink check" in (log_dir / "ideas.json.log").read_text()
    log.remove()


def test_setup_logger_without_json_sink(tmp_path):
    log_dir = tmp_path / "logs"

    log = setup_logger(str(log_dir), LoggingConfig(json_sink=False), level="warning")
    log.info("plain only")

    assert "plain only" in (log_dir / "shorts_ideas.log").read_text()
    assert not (log_dir / "shorts_ideas.json.log").exists()
    log.remove()
