"""Tests for structlog configuration."""

import json
import logging

import structlog

from depgraph.logging import configure_default_logging, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("depgraph").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("depgraph").level == logging.WARNING

    def test_json_mode_output(self, capfd) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("depgraph.test")
        log.warning("dependency dropped from graph", project="rustc_ast")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "dependency dropped from graph"
        assert parsed["project"] == "rustc_ast"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "depgraph.test"

    def test_debug_suppressed_without_verbose(self, capfd) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("depgraph.test").debug("noise")
        captured = capfd.readouterr()
        assert captured.err == ""

    def test_graphviz_debug_is_suppressed(self, capfd) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("graphviz").debug("run ['dot', '-Tsvg']")
        captured = capfd.readouterr()
        assert logging.getLogger("graphviz").level == logging.WARNING
        assert captured.err == ""


class TestDefaultLogging:
    def test_debug_filtered_before_configuration(self, capfd) -> None:
        structlog.reset_defaults()
        configure_default_logging()
        structlog.get_logger("depgraph.graph.builder").debug(
            "dropping dangling dependency", dependency="rustc_span"
        )
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_warnings_reach_stdlib_logging(self, caplog) -> None:
        structlog.reset_defaults()
        configure_default_logging()
        structlog.get_logger("depgraph.graph.exporter").warning("graphviz render failed")
        assert any("graphviz render failed" in r.getMessage() for r in caplog.records)

    def test_existing_configuration_is_kept(self) -> None:
        wrapper = structlog.make_filtering_bound_logger(logging.DEBUG)
        structlog.configure(wrapper_class=wrapper)
        configure_default_logging()
        assert structlog.get_config()["wrapper_class"] is wrapper
