import logging

import pytest

from FD2NF.utils.logging import clear_log_file, get_logger, setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    setup_logging(level="DEBUG", format_type="simple", log_to_file=True, log_file=str(log_file))

    get_logger("FD2NF.test").debug("closure computed")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "DEBUG | FD2NF.test | closure computed" in log_file.read_text(encoding="utf-8")

    clear_log_file(str(log_file))
    assert not log_file.exists()


def test_setup_logging_from_config():
    setup_logging_from_config()
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
