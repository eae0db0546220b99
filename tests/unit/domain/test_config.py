"""Unit tests for ConfigurationLoader."""

import logging

import pytest

from async_closure_linter.domain.config import ConfigurationLoader


def test_defaults_when_empty() -> None:
    loader = ConfigurationLoader()
    assert loader.exclude == ()
    assert loader.output_format == "text"
    assert loader.config == {}


def test_reads_exclude_and_output_format() -> None:
    loader = ConfigurationLoader({"exclude": [".build", "Generated/*"], "output_format": "json"})
    assert loader.exclude == (".build", "Generated/*")
    assert loader.output_format == "json"


def test_invalid_output_format_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        loader = ConfigurationLoader({"output_format": "xml"})
    assert loader.output_format == "text"
    assert "output_format" in caplog.text


def test_invalid_exclude_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        loader = ConfigurationLoader({"exclude": ".build"})
    assert loader.exclude == ()
    assert "exclude" in caplog.text


def test_non_string_exclude_entries_are_dropped() -> None:
    loader = ConfigurationLoader({"exclude": ["Pods", 3]})
    assert loader.exclude == ("Pods",)


def test_unknown_key_is_warned(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        ConfigurationLoader({"severity": "error"})
    assert "unknown key 'severity'" in caplog.text


def test_config_dict_is_copied() -> None:
    raw: dict[str, object] = {"exclude": ["A"]}
    loader = ConfigurationLoader(raw)
    raw["exclude"] = ["B"]
    assert loader.exclude == ("A",)
