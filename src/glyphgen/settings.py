"""Generator settings.

GeneratorSettings

`output_dir` (`Path`)
: Directory the output paths are resolved against when writing.

`config_path` (`Path`)
: Config document listing the glyph sets.

`latin_index_path` (`Path`)
: Grid-coordinate index shared by the Latin glyph sets.

`latin_alias_path` (`Path`)
: NFC to NFD alias file generated from the Latin index.

`icon_index_path` (`Path`)
: Grid-coordinate index for the UI icons.

`include_icons` (`bool`)
: List the Icons glyph set in the config document. The icon index is
  generated either way.

The output paths are copied into the generated documents as written, so keep
them relative to the codegen working directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
import yaml

from glyphgen.exceptions import SettingsError


OUTPUT_FIELDS = ("config_path", "latin_index_path", "latin_alias_path", "icon_index_path")


class GeneratorSettings(BaseModel):
    """Where the generator writes and which glyph sets it lists."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_dir: Path = Path(".")
    config_path: Path = Path("config.json")
    latin_index_path: Path = Path("src_data/latin_index.json")
    latin_alias_path: Path = Path("src_data/latin_aliases.txt")
    icon_index_path: Path = Path("src_data/icon_index.json")
    include_icons: bool = False

    @model_validator(mode="after")
    def _check_distinct_outputs(self) -> GeneratorSettings:
        seen: dict[Path, str] = {}
        for name in OUTPUT_FIELDS:
            target = self.resolve(getattr(self, name)).resolve()
            if target in seen:
                raise ValueError(f"{seen[target]} and {name} both point at {target}")
            seen[target] = name
        return self

    def reference(self, path: PurePath) -> str:
        """Return ``path`` as it should appear inside generated documents."""
        return path.as_posix()

    def resolve(self, path: str | PurePath) -> Path:
        """Return the on-disk location of an output path."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.output_dir / candidate

    def with_overrides(self, overrides: Mapping[str, Any]) -> GeneratorSettings:
        """Return a copy with the non-``None`` values of ``overrides`` applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return GeneratorSettings.model_validate({**self.model_dump(), **updates})
        except ValidationError as exc:
            raise SettingsError(f"invalid settings: {exc}") from exc


def load_settings(path: Path) -> GeneratorSettings:
    """Load settings from a YAML mapping."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"cannot read settings file {path}: {exc}") from exc
    try:
        payload = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"malformed settings file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsError(f"settings file {path} must contain a mapping")
    try:
        return GeneratorSettings.model_validate(payload)
    except ValidationError as exc:
        raise SettingsError(f"invalid settings in {path}: {exc}") from exc


__all__ = ["GeneratorSettings", "load_settings"]
