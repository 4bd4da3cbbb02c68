"""
Unit tests for SystemReporter.

Tests verbose filtering, file logging and sink forwarding.
"""

import logging
import os

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji


class TestSystemReporter:
    """Test SystemReporter behaviour."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _create_reporter(self, tmp_path, **kwargs) -> SystemReporter:
        kwargs.setdefault("console", False)
        return SystemReporter(
            name=kwargs.pop("name", "reporter_test"),
            log_dir=str(tmp_path),
            level=logging.DEBUG,
            **kwargs,
        )

    def _read_log(self, reporter: SystemReporter) -> str:
        for handler in reporter.logger.handlers:
            handler.flush()
        with open(reporter.log_file, encoding="utf-8") as f:
            return f.read()

    # ================================================================
    # Test Methods
    # ================================================================

    def test_writes_context_prefixed_lines(self, tmp_path):
        reporter = self._create_reporter(tmp_path)

        reporter.info("Broker ready", context="ConnectionBroker")
        content = self._read_log(reporter)
        reporter.close()

        assert reporter.log_file == os.path.join(str(tmp_path), "reporter_test.log")
        assert "[ConnectionBroker] Broker ready" in content
        assert "| INFO     |" in content

    def test_verbose_filtering(self, tmp_path):
        reporter = self._create_reporter(tmp_path, name="reporter_verbose", verbose=1)

        reporter.info("shown", verbose_level=1)
        reporter.info("hidden", verbose_level=2)
        reporter.debug("debug hidden")
        content = self._read_log(reporter)
        reporter.close()

        assert "shown" in content
        assert "hidden" not in content

    def test_verbose_clamped(self, tmp_path):
        reporter = self._create_reporter(tmp_path, name="reporter_clamp", verbose=9)
        assert reporter.verbose == 3

        reporter.set_verbose(-4)
        assert reporter.verbose == 0
        reporter.close()

    def test_sink_receives_forwarded_lines(self, tmp_path):
        forwarded = []
        reporter = self._create_reporter(
            tmp_path,
            name="reporter_sink",
            verbose=3,
            sink=lambda level, msg, ctx: forwarded.append((level, msg, ctx)),
        )

        reporter.info("connected", context="RemoteSessionClient")
        reporter.error("failed", context="TxBroadcaster")
        reporter.debug("not forwarded")
        reporter.close()

        assert forwarded == [
            ("info", "connected", "RemoteSessionClient"),
            ("error", "failed", "TxBroadcaster"),
        ]

    def test_failing_sink_does_not_break_logging(self, tmp_path, capsys):
        def broken_sink(level, msg, ctx):
            raise RuntimeError("sink down")

        reporter = self._create_reporter(
            tmp_path, name="reporter_broken", sink=broken_sink
        )

        reporter.warning("still logged")
        content = self._read_log(reporter)
        reporter.close()

        assert "still logged" in content
        assert "sink down" in capsys.readouterr().err


class TestEmojiRegistry:
    """Test the emoji registry categories."""

    def test_categories_are_registered(self):
        categories = Emoji.get_all_categories()

        assert "WALLET" in categories
        assert "NETWORK" in categories
        assert Emoji.WALLET.PAIRING in Emoji.WALLET.get_all().values()
