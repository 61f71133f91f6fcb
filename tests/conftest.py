"""Shared pytest fixtures for the typedconf test suite."""

from __future__ import annotations

import textwrap
from typing import Any

import pytest
import yaml

from typedconf import Config


SAMPLE_YAML = textwrap.dedent(
    """\
    flag: true
    text: a string
    timeout: 600
    gravity_acceleration: 9.8
    key_for_list: [a, list, of, strings]
    key_for_map:
      foo: bar
      baz: qux
    ports:
      http: 80
      https: 443
      ssh: 22
      dns: 53
    a:
      somewhat:
        deeply:
          nested:
            string: ACTUALLY, A ROPE
    expect:
      to: 5
    always_null: null
    spaces are:
      actually fine: see?
    empty_map: {}
    empty_list: []
    """
)


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """A parsed YAML document covering every node kind."""
    return yaml.safe_load(SAMPLE_YAML)


@pytest.fixture
def config(sample_data: dict[str, Any]) -> Config:
    """A strict Config over sample_data."""
    return Config(sample_data)
