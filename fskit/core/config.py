"""
Settings for fskit.

Loads operator defaults (directory mode, JSON indent, audit logging) from a
YAML file. Anything missing or unreadable falls back to the defaults.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


DEFAULT_CONFIG_PATH = "fskit.yaml"


@dataclass
class Settings:
    """Operator defaults."""
    directory_mode: int = 0o777
    json_indent: int = 4
    audit_enabled: bool = False
    audit_log_path: str = "data/audit_log.jsonl"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build settings from the nested YAML mapping."""
        directory = data.get("directory") or {}
        json_opts = data.get("json") or {}
        audit = data.get("audit") or {}
        defaults = cls()

        return cls(
            directory_mode=_parse_mode(directory.get("mode", defaults.directory_mode)),
            json_indent=int(json_opts.get("indent", defaults.json_indent)),
            audit_enabled=bool(audit.get("enabled", defaults.audit_enabled)),
            audit_log_path=str(audit.get("log_path", defaults.audit_log_path)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the nested mapping written to YAML."""
        return {
            "directory": {"mode": oct(self.directory_mode)},
            "json": {"indent": self.json_indent},
            "audit": {
                "enabled": self.audit_enabled,
                "log_path": self.audit_log_path,
            },
        }


def _parse_mode(value: Union[int, str]) -> int:
    """Accept 511, "0777" or "0o777"."""
    if isinstance(value, int):
        return value
    text = str(value).strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    return int(text, 8)


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the YAML file (default: fskit.yaml)

    Returns:
        Settings, or defaults if the file is missing or invalid
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    if not path.exists():
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        return Settings.from_dict(config.get("fskit", config))
    except (yaml.YAMLError, OSError, ValueError, TypeError, AttributeError):
        return Settings()


def save_settings(settings: Settings, config_path: Optional[Union[str, Path]] = None) -> None:
    """Write settings under the top-level fskit key."""
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump({"fskit": settings.to_dict()}, f, default_flow_style=False)
