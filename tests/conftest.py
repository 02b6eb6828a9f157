"""Shared test fixtures for the confprops test suite."""

from __future__ import annotations

from typing import Any

import pytest

from confprops.provider import InMemoryProvider


@pytest.fixture
def provider() -> InMemoryProvider:
    """An empty in-memory provider."""
    return InMemoryProvider()


@pytest.fixture
def config_yaml(tmp_path: Any) -> str:
    """Write a sample configuration YAML file and return its path."""
    content = """
db:
  host: " db.internal "
  port: 5432
  pool:
    size: 10
features:
  enabled: true
  roles: [Admin, Editor]
service:
  endpoint: https://api.example.com:8443/v1
  timeout: null
"""
    yaml_file = tmp_path / "app.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
