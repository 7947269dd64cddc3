"""Settings that control how AI message text is parsed and rendered."""

from dataclasses import dataclass, fields
import json
from typing import Any, Dict


class MarkdownRenderSettingsError(Exception):
    """Raised when render settings cannot be loaded."""


@dataclass
class MarkdownRenderSettings:
    """Settings for parsing and rendering a message."""
    math_enabled: bool = True
    strikethrough_enabled: bool = True
    code_class_prefix: str = "language-"
    typeset_timeout: float | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MarkdownRenderSettings':
        """
        Create settings from a dictionary, keeping defaults for missing keys.

        Args:
            data: Mapping of setting names to values

        Returns:
            The new settings

        Raises:
            MarkdownRenderSettingsError: If a key is unknown or a value has the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise MarkdownRenderSettingsError(f"Unknown settings: {', '.join(sorted(unknown))}")

        settings = cls()
        for name in ("math_enabled", "strikethrough_enabled"):
            if name in data:
                if not isinstance(data[name], bool):
                    raise MarkdownRenderSettingsError(f"Setting '{name}' must be true or false")

                setattr(settings, name, data[name])

        if "code_class_prefix" in data:
            if not isinstance(data["code_class_prefix"], str):
                raise MarkdownRenderSettingsError("Setting 'code_class_prefix' must be a string")

            settings.code_class_prefix = data["code_class_prefix"]

        if "typeset_timeout" in data:
            timeout = data["typeset_timeout"]
            if timeout is not None:
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                    raise MarkdownRenderSettingsError("Setting 'typeset_timeout' must be a positive number or null")

                timeout = float(timeout)

            settings.typeset_timeout = timeout

        return settings

    @classmethod
    def load(cls, path: str) -> 'MarkdownRenderSettings':
        """
        Load settings from a JSON file.

        Args:
            path: Path to the settings file

        Returns:
            The loaded settings

        Raises:
            MarkdownRenderSettingsError: If the file cannot be read or holds invalid settings
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except OSError as e:
            raise MarkdownRenderSettingsError(f"Failed to read settings file {path}: {str(e)}") from e

        except UnicodeDecodeError as e:
            raise MarkdownRenderSettingsError(f"Settings file {path} is not valid UTF-8: {str(e)}") from e

        except json.JSONDecodeError as e:
            raise MarkdownRenderSettingsError(f"Settings file {path} is not valid JSON: {str(e)}") from e

        if not isinstance(data, dict):
            raise MarkdownRenderSettingsError(f"Settings file {path} must contain a JSON object")

        return cls.from_dict(data)
