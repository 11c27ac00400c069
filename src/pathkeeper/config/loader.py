"""Config loading entry points for pathkeeper."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import PathkeeperConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("pathkeeper.default.yaml")
HOME_ENV_VAR = "PATHKEEPER_HOME"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class _UniqueKeyLoader(yaml.SafeLoader):
    """Safe YAML loader that rejects duplicate mapping keys."""

    def construct_mapping(self, node, deep=False):  # type: ignore[override]
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> PathkeeperConfig:
    """Load the pathkeeper configuration applying optional overrides.

    Precedence, lowest first: packaged defaults, ``path``, ``overrides``,
    then the ``PATHKEEPER_HOME`` environment variable.
    """

    default_data = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if path:
        config_data = _expect_mapping(_read_structured_file(path), path)
    else:
        config_data = {}

    merged: dict[str, Any] = _deep_merge(default_data, config_data)

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    env_home = os.getenv(HOME_ENV_VAR)
    if env_home:
        merged = _deep_merge(merged, {"registry": {"home": env_home}})

    try:
        return PathkeeperConfig.model_validate(merged)
    except ValidationError as exc:
        source = path or DEFAULT_CONFIG_PATH
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    merged = _read_structured_file(DEFAULT_CONFIG_PATH)
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(merged, sort_keys=False),
        encoding="utf-8",
    )


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.load(text, Loader=_UniqueKeyLoader) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text, object_pairs_hook=_reject_duplicate_pairs)
    except (yaml.YAMLError, ValueError) as exc:
        # TOMLDecodeError, JSONDecodeError and duplicate JSON keys are ValueErrors.
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    raise ConfigError(f"Unsupported config format for {path}")


def _reject_duplicate_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"found duplicate key {key!r}")
        result[key] = value
    return result


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``registry.home``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(key, str) and "." in key:
            *parents, leaf = key.split(".")
            converted: dict[str, Any] = {leaf: value}
            for segment in reversed(parents):
                converted = {segment: converted}
        else:
            converted = {key: value}
        result = _deep_merge(result, converted)
    return result


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HOME_ENV_VAR",
    "load_config",
    "dump_example_config",
]
