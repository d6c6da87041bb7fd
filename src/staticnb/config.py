"""
YAML configuration for notebooks.

A config file sets the notebook title, output path and head fragments:

    title: Orbit simulation
    output: out/orbit.html
    style: true
    headers:
      mathjax: '<script src="https://cdn.example/mathjax.js"></script>'
      cell-style: null   # null drops a header

Unset keys leave the notebook untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import HEADER_CELL_STYLE, Notebook

LOGGER = logging.getLogger(__name__)

_KNOWN_KEYS = ("title", "output", "style", "headers")


class ConfigError(ValueError):
    """The configuration document is malformed."""


@dataclass(frozen=True)
class NotebookConfig:
    title: Optional[str] = None
    output: Optional[str] = None
    # False blanks the default stylesheet
    style: Optional[bool] = None
    # None values remove the header
    headers: Dict[str, Optional[str]] = field(default_factory=dict)

    def apply(self, nb: Notebook) -> Notebook:
        if self.title is not None:
            nb.title = self.title
        if self.output is not None:
            nb.output = self.output
        if self.style is False:
            nb.set_header(HEADER_CELL_STYLE, "")
        for header_id, fragment in self.headers.items():
            if fragment is None:
                nb.remove_header(header_id)
            else:
                nb.set_header(header_id, fragment)
        return nb


def _optional_str(data: dict, key: str) -> Optional[str]:
    val = data.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise ConfigError(f"'{key}' must be a string, got {type(val).__name__}")
    return val


def config_from_dict(data: object) -> NotebookConfig:
    if data is None:
        return NotebookConfig()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")
    unknown = [k for k in data if k not in _KNOWN_KEYS]
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(map(str, unknown))}")

    style = data.get("style")
    if style is not None and not isinstance(style, bool):
        raise ConfigError("'style' must be true or false")

    headers_raw = data.get("headers") or {}
    if not isinstance(headers_raw, dict):
        raise ConfigError("'headers' must be a mapping of id to HTML fragment")
    headers: Dict[str, Optional[str]] = {}
    for k, v in headers_raw.items():
        if v is not None and not isinstance(v, str):
            raise ConfigError(f"header {k!r} must be a string or null")
        headers[str(k)] = v

    return NotebookConfig(
        title=_optional_str(data, "title"),
        output=_optional_str(data, "output"),
        style=style,
        headers=headers,
    )


def parse_config(text: str) -> NotebookConfig:
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(text)
    except YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}") from e
    return config_from_dict(data)


def load_config(path: Union[str, Path]) -> NotebookConfig:
    p = Path(path)
    LOGGER.debug("Loading notebook config from %s", p)
    return parse_config(p.read_text(encoding="utf-8"))
