import logging

import pytest
from unittest.mock import patch, ANY

from src.app import logger as app_logger

import run_api


@patch('run_api.uvicorn.run')
def test_main_builds_index_before_serving(mock_run, corpus_file):
    run_api.main([str(corpus_file), "--port", "9100", "--host", "127.0.0.1"])

    mock_run.assert_called_once_with(ANY, host="127.0.0.1", port=9100, log_level=ANY)
    app = mock_run.call_args[0][0]
    assert app.state.autocomplete.loaded is True
    assert app.state.autocomplete.search("ca") == ["cat"]


@patch('run_api.uvicorn.run')
def test_main_uses_config_defaults(mock_run, corpus_file, monkeypatch):
    monkeypatch.setenv("AC_CORPUS_PATH", str(corpus_file))
    monkeypatch.delenv("AC_HOST", raising=False)
    monkeypatch.delenv("AC_PORT", raising=False)

    run_api.main([])

    mock_run.assert_called_once_with(ANY, host="0.0.0.0", port=9000, log_level=ANY)


@patch('run_api.uvicorn.run')
def test_main_missing_corpus_exits_before_serving(mock_run, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        run_api.main([str(tmp_path / "missing.txt")])

    assert excinfo.value.code == 1
    mock_run.assert_not_called()


@patch('run_api.uvicorn.run')
def test_main_without_corpus_argument_exits(mock_run, monkeypatch):
    monkeypatch.delenv("AC_CORPUS_PATH", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        run_api.main([])

    assert excinfo.value.code == 1
    mock_run.assert_not_called()


@pytest.fixture
def app_log_file(tmp_path, monkeypatch):
    """Route the application package logger to a fresh file for one test."""
    log_file = tmp_path / "logs" / "app.log"
    monkeypatch.setenv("AC_LOG_FILE", str(log_file))
    monkeypatch.setenv("AC_LOG_LEVEL", "DEBUG")
    package_logger = logging.getLogger(run_api.APP_LOGGER)
    package_logger.handlers = []
    yield log_file
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    app_logger._handlers.pop(str(log_file), None)


@patch('run_api.uvicorn.run')
def test_main_logs_index_build(mock_run, corpus_file, app_log_file):
    """
    Records from the index and service modules reach the configured log file.
    """
    with patch.object(logging.Logger, 'hasHandlers', return_value=False):
        run_api.main([str(corpus_file)])

    app = mock_run.call_args[0][0]
    app.state.autocomplete.search("ca")

    contents = app_log_file.read_text(encoding="utf-8")
    assert "src.app.index - INFO - Successfully read corpus file" in contents
    assert "src.app.index - INFO - Tokenized corpus into 9 words" in contents
    assert "src.app.autocomplete - INFO - Loading corpus from" in contents
    assert "Indexed 6 distinct words (9 total) in" in contents
    assert "src.app.completer - DEBUG - # of matches for 'ca': 1" in contents
