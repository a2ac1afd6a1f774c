"""
Parser settings for talentbook.

This module provides configuration for the prefixes recognized in command
arguments, the interview date format and the largest accepted index.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from talentbook.core.index import DEFAULT_MAX_INDEX
from talentbook.exceptions import SettingsError
from talentbook.model.fields import DEFAULT_DATE_FORMAT

PREFIX_KEYS = (
    "name_prefix",
    "phone_prefix",
    "email_prefix",
    "address_prefix",
    "tag_prefix",
    "date_prefix",
)


@dataclass(frozen=True)
class ParserSettings:
    """Configuration shared by every command parser.

    Any subset of the values may be overridden; the rest keep their
    defaults. Overrides can come from keyword arguments, a dict or a YAML file.

    Examples:
        # All defaults
        settings = ParserSettings()

        # Partial override from dict
        settings = ParserSettings.from_dict({"date_prefix": "i/"})

        # From YAML file
        settings = ParserSettings.from_yaml("talentbook.yaml")
    """

    name_prefix: str = "n/"
    phone_prefix: str = "p/"
    email_prefix: str = "e/"
    address_prefix: str = "a/"
    tag_prefix: str = "t/"
    date_prefix: str = "d/"

    date_format: str = DEFAULT_DATE_FORMAT
    max_index: int = DEFAULT_MAX_INDEX

    def __post_init__(self):
        """Reject prefixes the tokenizer could not recognize unambiguously."""
        seen = {}
        for key in PREFIX_KEYS:
            prefix = getattr(self, key)
            if not isinstance(prefix, str) or not prefix:
                raise SettingsError(key, "prefix must be a non-empty string")
            if any(ch.isspace() for ch in prefix):
                raise SettingsError(key, "prefix must not contain whitespace")
            if prefix in seen:
                raise SettingsError(key, f"prefix '{prefix}' is already used by {seen[prefix]}")
            seen[prefix] = key

        if not isinstance(self.date_format, str) or "%" not in self.date_format:
            raise SettingsError("date_format", "must be a strftime format string")

        if isinstance(self.max_index, bool) or not isinstance(self.max_index, int):
            raise SettingsError("max_index", "must be an integer")
        if self.max_index < 1:
            raise SettingsError("max_index", "must be at least 1")

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ParserSettings:
        """Build settings from a mapping of overrides.

        Args:
            config: Overrides keyed by setting name. Unknown keys are ignored.

        Returns:
            ParserSettings with the given overrides applied

        Raises:
            SettingsError: If an overridden value is invalid
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ParserSettings:
        """Build settings from a YAML mapping of overrides.

        Args:
            yaml_path: Settings file, e.g. talentbook.yaml

        Returns:
            ParserSettings with the file's overrides applied

        Raises:
            SettingsError: If the file does not hold a mapping or a value is invalid

        Example YAML:
            date_prefix: "i/"
            date_format: "%d/%m/%Y"
            max_index: 10000
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise SettingsError(str(path), "settings file must contain a mapping")

        return cls.from_dict(config)


DEFAULT_SETTINGS = ParserSettings()
