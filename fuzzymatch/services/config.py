"""Configuration for the matcher.

Tuning constants live in MatchSettings, a frozen dataclass. The module
constants below are the defaults and are never mutated; hosts that want
different weights build their own MatchSettings (directly, via
merge_with, or from ~/.config/fuzzymatch/config.json).

Resolution order: explicit settings > config file > defaults
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from ..models.exceptions import ConfigValidationError
from .markup import MarkupStyle

logger = logging.getLogger(__name__)

# The scores are arranged so that a continuous match of characters
# results in a total score of 1.
SCORE_CONTINUE_MATCH = 1.0
# A new match at the start of a word (CamelCase, hyphen-separated, etc.)
SCORE_START_WORD = 0.9
# Any other match
SCORE_OK = 0.8

# Per skipped character. Only reorders the SCORE_* tiers after ~100 skips.
PENALTY_SKIPPED = 0.999
# Case-insensitive but not case-exact character match.
PENALTY_CASE_MISMATCH = 0.9999
# Applied once when the string has characters left after the abbreviation.
PENALTY_NOT_COMPLETE = 0.99

WORD_SEPARATORS = frozenset("\\/-_+.# \t\"@[({&")

CONFIG_DIR_ENV = "FUZZYMATCH_CONFIG_DIR"

_WEIGHT_FIELDS = (
    "score_continue_match",
    "score_start_word",
    "score_ok",
    "penalty_skipped",
    "penalty_case_mismatch",
    "penalty_not_complete",
)


@dataclass(frozen=True)
class MatchSettings:
    """Score tiers, penalties and output options for a Matcher."""

    score_continue_match: float = SCORE_CONTINUE_MATCH
    score_start_word: float = SCORE_START_WORD
    score_ok: float = SCORE_OK
    penalty_skipped: float = PENALTY_SKIPPED
    penalty_case_mismatch: float = PENALTY_CASE_MISMATCH
    penalty_not_complete: float = PENALTY_NOT_COMPLETE
    word_separators: frozenset[str] = WORD_SEPARATORS
    markup_style: MarkupStyle = MarkupStyle.HTML
    # None disables the guard; match() is then total over all inputs
    max_input_length: int | None = None

    def __post_init__(self) -> None:
        for name in _WEIGHT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigValidationError(name, value, "must be a number")
            if not 0.0 < value <= 1.0:
                raise ConfigValidationError(name, value, "must be in (0, 1]")
        if self.max_input_length is not None and self.max_input_length < 1:
            raise ConfigValidationError(
                "max_input_length", self.max_input_length, "must be positive or null"
            )
        if not isinstance(self.word_separators, frozenset):
            # Accept any iterable of characters, e.g. a string from JSON
            object.__setattr__(self, "word_separators", frozenset(self.word_separators))

    def to_dict(self) -> dict:
        """Serialize only the values that differ from the defaults."""
        result: dict = {}
        for name in _WEIGHT_FIELDS:
            value = getattr(self, name)
            if value != getattr(DEFAULT_SETTINGS, name):
                result[name] = value
        if self.word_separators != WORD_SEPARATORS:
            result["word_separators"] = "".join(sorted(self.word_separators))
        if self.markup_style != MarkupStyle.HTML:
            result["markup_style"] = self.markup_style.value
        if self.max_input_length is not None:
            result["max_input_length"] = self.max_input_length
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "MatchSettings":
        kwargs: dict = {name: data[name] for name in _WEIGHT_FIELDS if name in data}
        if data.get("word_separators") is not None:
            kwargs["word_separators"] = frozenset(data["word_separators"])
        if data.get("markup_style"):
            try:
                kwargs["markup_style"] = MarkupStyle(data["markup_style"])
            except ValueError:
                logger.warning("Unknown markup_style %r, using html", data["markup_style"])
        if data.get("max_input_length") is not None:
            kwargs["max_input_length"] = data["max_input_length"]
        return cls(**kwargs)

    def merge_with(self, override: "MatchSettings") -> "MatchSettings":
        """Return new settings with override's non-default values taking precedence.

        A field the override leaves at its default counts as unset, so an
        override can't put a field back to its default this way. Use
        dataclasses.replace for that.
        """
        merged = {}
        for f in fields(self):
            value = getattr(override, f.name)
            merged[f.name] = value if value != getattr(DEFAULT_SETTINGS, f.name) else getattr(self, f.name)
        return MatchSettings(**merged)


DEFAULT_SETTINGS = MatchSettings()


def _atomic_write_json(path: Path, data: dict) -> None:
    """Write JSON via a temp file and rename so readers never see a partial file."""
    temp_path = path.with_suffix(".tmp")
    temp_path.write_text(json.dumps(data, indent=2))
    temp_path.replace(path)


class ConfigManager:
    """Loads and saves MatchSettings from a JSON config file."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else Path.home() / ".config" / "fuzzymatch"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._settings: MatchSettings | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def settings(self) -> MatchSettings:
        if self._settings is None:
            self._settings = self._load_settings()
        return self._settings

    def _load_settings(self) -> MatchSettings:
        """Load settings from disk, falling back to defaults on any problem."""
        if not self._config_file.exists():
            return DEFAULT_SETTINGS
        try:
            data = json.loads(self._config_file.read_text())
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
            return MatchSettings.from_dict(data)
        except (OSError, ValueError, TypeError, ConfigValidationError) as e:
            logger.warning("Ignoring config file %s: %s", self._config_file, e)
        return DEFAULT_SETTINGS

    def save_settings(self, settings: MatchSettings) -> None:
        """Persist settings, writing only non-default values."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _atomic_write_json(self._config_file, settings.to_dict())
        self._settings = settings
        logger.debug("Saved settings to %s", self._config_file)

    def resolve(self, override: MatchSettings | None = None) -> MatchSettings:
        """Resolve settings: override > config file > defaults."""
        resolved = self.settings
        if override is not None:
            resolved = resolved.merge_with(override)
        return resolved
