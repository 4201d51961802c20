import logging

import pytest

from acoustic.core.errors import InvalidArgumentError
from acoustic.logger import ColoredFormatter, LogConfig, SimulationLogger


def make_config(tmp_path, **kwargs):
    config = LogConfig(log_dir=tmp_path / "logs", **kwargs)
    config.console_logging["enabled"] = False
    return config


def test_invalid_level(tmp_path):
    with pytest.raises(InvalidArgumentError):
        SimulationLogger("test_logger_invalid", make_config(tmp_path, level="loud"))


def test_buffer_and_file(tmp_path):
    logger = SimulationLogger("test_logger_buffer", make_config(tmp_path))
    logger.info("伝播ステップ 1")
    logger.debug("表示されない")
    logger.close()

    logs = logger.get_recent_logs()
    assert any("伝播ステップ 1" in log for log in logs)
    assert not any("表示されない" in log for log in logs)
    text = (tmp_path / "logs" / "acoustic.log").read_text(encoding="utf-8")
    assert "伝播ステップ 1" in text


def test_section_propagates_to_parent(tmp_path):
    logger = SimulationLogger("test_logger_section", make_config(tmp_path))
    section = logger.start_section("propagation")
    section.warning("section message")

    assert section.name == "test_logger_section.propagation"
    assert any("section message" in log for log in logger.get_recent_logs())
    logger.close()


def test_context_manager_logs_and_reraises(tmp_path):
    logger = SimulationLogger("test_logger_context", make_config(tmp_path))
    with pytest.raises(RuntimeError):
        with logger:
            raise RuntimeError("boom")

    assert any("boom" in log for log in logger.get_recent_logs())
    logger.close()


def test_save_debug_info(tmp_path):
    logger = SimulationLogger("test_logger_save", make_config(tmp_path))
    logger.log_performance("propagation", 1.25)
    path = tmp_path / "debug.txt"
    logger.save_debug_info(path)
    logger.close()

    assert "Performance - propagation: 1.250 seconds" in path.read_text(encoding="utf-8")


def test_colored_formatter_keeps_record():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    text = ColoredFormatter(use_color=True).format(record)

    assert "\033[32mINFO\033[0m" in text
    assert record.levelname == "INFO"
