"""Tests for JSONL logging bootstrap."""

import json
import logging

from resolve_dependency_path.logging_setup import JsonlHandler
from resolve_dependency_path.logging_setup import init_json_logging


def _read_records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_handler_writes_structured_record(tmp_path):
    path = tmp_path / "nested" / "log.jsonl"
    handler = JsonlHandler(path)
    logger = logging.getLogger("resolve_dependency_path.tests.jsonl")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    try:
        logger.info("[resolve] ./bar -> /proj/bar.js", extra={"event": "resolve", "dependency": "./bar"})
    finally:
        logger.removeHandler(handler)

    (record,) = _read_records(path)
    assert record["lvl"] == "INFO"
    assert record["logger"] == "resolve_dependency_path.tests.jsonl"
    assert record["event"] == "resolve"
    assert record["dependency"] == "./bar"
    assert record["message"] == "[resolve] ./bar -> /proj/bar.js"
    assert record["schema"]["name"] == "resolve_dependency_path.log"
    assert "lineno" not in record


def test_init_replaces_existing_jsonl_handler(tmp_path, restore_root_logger):
    first = init_json_logging(tmp_path / "first.jsonl", "debug")
    second = init_json_logging(tmp_path / "second.jsonl", "warning")

    root = logging.getLogger()
    jsonl_handlers = [h for h in root.handlers if isinstance(h, JsonlHandler)]
    assert jsonl_handlers == [second]
    assert first not in root.handlers
    assert root.level == logging.WARNING


def test_init_unknown_level_falls_back_to_info(tmp_path, restore_root_logger):
    init_json_logging(tmp_path / "log.jsonl", "chatty")

    assert logging.getLogger().level == logging.INFO


def test_no_event_key_without_extra(tmp_path):
    path = tmp_path / "log.jsonl"
    handler = JsonlHandler(path)
    logger = logging.getLogger("resolve_dependency_path.tests.plain")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    try:
        logger.info("[resolve] ./bar -> /proj/bar.js")
    finally:
        logger.removeHandler(handler)

    (record,) = _read_records(path)
    assert "event" not in record
