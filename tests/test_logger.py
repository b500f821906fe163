"""Core module for testing the structured event logger."""

from b64codec.utils.logger import Logger, Level, Event, HEADER


def test_configure_logger__writes_header_once(codec_env):
    logger = Logger()
    logger.configure_logger()
    logger.configure_logger()
    logger.close()

    logger = Logger()
    logger.configure_logger()
    logger.close()

    content = codec_env.read_text()
    assert content.count("Timestamp") == 1
    assert content.startswith(HEADER)


def test_log_event__line_format(codec_env):
    logger = Logger()
    logger.configure_logger()
    logger.log_event(Level.LEVEL_INFO, Event.ENCODE, 3, "TWFu")
    logger.log_event(Level.LEVEL_WARNING, Event.USAGE_ERROR, message="unknown\ncommand")
    logger.log_event(Level.LEVEL_ERROR, Event.DECODE_FAILED, 3, "x" * 50)
    logger.close()

    lines = codec_env.read_text().splitlines()[2:]
    assert len(lines) == 3

    info, warning, error = lines
    assert info.startswith("[-] ")
    assert "| INFO    | ENCODE       | 3        | TWFu" in info
    assert warning.startswith("[!] ")
    assert warning.endswith("unknowncommand")
    assert error.startswith("[x] ")
    assert error.endswith("| " + "x" * 20)


def test_log_event__console_echo(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("PRINT_CODEC_LOGS", "true")
    logger = Logger(str(tmp_path / "other.log"))
    logger.configure_logger()
    logger.log_event(Level.LEVEL_INFO, Event.DECODE, 4, "TQ==")
    logger.close()

    out = capsys.readouterr().out
    assert "Timestamp" in out
    assert "DECODE" in out
    assert (tmp_path / "other.log").exists()


def test_close__only_detaches_own_handler(tmp_path):
    """Test that closing one logger leaves another logger's file handler in place."""
    first = Logger(str(tmp_path / "first.log"))
    second = Logger(str(tmp_path / "second.log"))
    first.configure_logger()
    second.configure_logger()

    first.close()
    second.log_event(Level.LEVEL_INFO, Event.ENCODE, 3, "TWFu")
    second.close()
    first.close()

    assert "ENCODE" in (tmp_path / "second.log").read_text()
    assert "ENCODE" not in (tmp_path / "first.log").read_text()
