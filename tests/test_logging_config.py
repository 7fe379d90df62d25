import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from loguru import logger

from github_api_client.logging_config import (
    _CONSUMER_TYPES,
    ConsoleLogConsumer,
    FileLogConsumer,
    LogConsumer,
    setup_logging,
)


class TestLoggingConfig(unittest.TestCase):
    def tearDown(self) -> None:
        logger.remove()

    def test_consumers_satisfy_protocol(self) -> None:
        self.assertIsInstance(ConsoleLogConsumer(), LogConsumer)
        self.assertIsInstance(FileLogConsumer(), LogConsumer)

    def test_defaults_to_console(self) -> None:
        self.assertEqual(setup_logging("DEBUG"), ["console (stderr, DEBUG)"])

    def test_unknown_consumer_is_skipped(self) -> None:
        self.assertEqual(setup_logging("INFO", [{"type": "syslog"}]), [])

    def test_per_consumer_level(self) -> None:
        descriptions = setup_logging("INFO", [{"type": "console", "level": "WARNING"}])

        self.assertEqual(descriptions, ["console (stderr, WARNING)"])

    def test_file_consumer_writes_messages(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "api.log"

            descriptions = setup_logging("DEBUG", [{"type": "file", "path": str(path)}])
            logger.debug("GET /repos/o/r -> 200")
            logger.remove()

            self.assertEqual(descriptions, [f"file ({path}, text, DEBUG)"])
            self.assertIn("GET /repos/o/r -> 200", path.read_text())

    def test_file_consumer_serializes_json_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "api.jsonl"

            descriptions = setup_logging("INFO", [{"type": "file", "path": str(path), "serialize": True}])
            logger.info("POST /repos/o/r/issues -> 201")
            logger.remove()

            self.assertEqual(descriptions, [f"file ({path}, json lines, INFO)"])
            record = json.loads(path.read_text().splitlines()[0])
            self.assertEqual(record["record"]["message"], "POST /repos/o/r/issues -> 201")

    def test_registered_consumer_types_are_used(self) -> None:
        class _RecordingConsumer:
            registered: list[str] = []

            def register(self, level: str) -> None:
                self.registered.append(level)

            def describe(self, level: str) -> str:
                return f"recording ({level})"

        self.assertIsInstance(_RecordingConsumer(), LogConsumer)
        with patch.dict(_CONSUMER_TYPES, {"recording": _RecordingConsumer}):
            descriptions = setup_logging("ERROR", [{"type": "recording"}])

        self.assertEqual(descriptions, ["recording (ERROR)"])
        self.assertEqual(_RecordingConsumer.registered, ["ERROR"])
