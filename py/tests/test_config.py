"""Tests for configuration and logging setup."""

import pytest
from loguru import logger
from pydantic import ValidationError

from barista import BaristaConfig, Class, configure_logging, disable_logging


class TestBaristaConfig:
    def test_defaults(self):
        config = BaristaConfig()
        assert config.log_level == "WARNING"
        assert config.trace_dispatch is False

    def test_level_is_normalised(self):
        assert BaristaConfig(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ValidationError):
            BaristaConfig(log_level="LOUD")

    def test_from_env(self):
        config = BaristaConfig.from_env({
            "BARISTA_LOG_LEVEL": "info",
            "BARISTA_TRACE_DISPATCH": "true",
            "UNRELATED": "x",
        })
        assert config.log_level == "INFO"
        assert config.trace_dispatch is True

    def test_from_env_defaults(self):
        assert BaristaConfig.from_env({}) == BaristaConfig()


class TestLogging:
    def test_silent_by_default(self):
        records = []
        handler_id = logger.add(records.append, level="TRACE")
        try:
            Class.create({"x": 1})
        finally:
            logger.remove(handler_id)
        assert records == []

    def test_debug_records_class_builds(self):
        records = []
        configure_logging(BaristaConfig(log_level="DEBUG", log_format="{message}"),
                          sink=records.append)
        Class.create({"x": 1}, name="Point")
        assert any("built class Point" in record for record in records)

    def test_trace_dispatch(self):
        records = []
        configure_logging(BaristaConfig(log_level="TRACE", trace_dispatch=True,
                                        log_format="{message}"),
                          sink=records.append)
        Base = Class.create({"render": lambda self: "base"}, name="Base")
        Sub = Base.extend(name="Sub")
        Sub()._super("render")()
        assert any("_super('render') on Sub resolved in Base" in record for record in records)

    def test_disable(self):
        records = []
        configure_logging(BaristaConfig(log_level="DEBUG"), sink=records.append)
        disable_logging()
        records.clear()
        Class.create()
        assert records == []

    def test_reconfigure_replaces_sink(self):
        first, second = [], []
        configure_logging(BaristaConfig(log_level="DEBUG"), sink=first.append)
        configure_logging(BaristaConfig(log_level="DEBUG"), sink=second.append)
        first.clear()
        Class.create()
        assert first == []
        assert second
