"""Vault bootstrap - the .graphnotes metadata directory and its config record."""

import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from graphnotes.indexer.filters import METADATA_DIR_NAME

logger = logging.getLogger(__name__)

CONFIG_VERSION = "1.0.0"
EVENTS_FILE_NAME = "events.jsonl"
CONFIG_FILE_NAME = "config.json"


@dataclass
class GraphSettings:
    """Graph view defaults."""

    default_layout: str = "force-directed"
    show_labels: bool = True
    node_size: int = 10

    def to_dict(self) -> dict:
        return {
            "defaultLayout": self.default_layout,
            "showLabels": self.show_labels,
            "nodeSize": self.node_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphSettings":
        return cls(
            default_layout=data.get("defaultLayout", "force-directed"),
            show_labels=data.get("showLabels", True),
            node_size=data.get("nodeSize", 10),
        )


@dataclass
class DisplaySettings:
    theme: str = "dark"
    editor_font_size: int = 16
    graph: GraphSettings = field(default_factory=GraphSettings)

    def to_dict(self) -> dict:
        return {
            "theme": self.theme,
            "editorFontSize": self.editor_font_size,
            "graphSettings": self.graph.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DisplaySettings":
        return cls(
            theme=data.get("theme", "dark"),
            editor_font_size=data.get("editorFontSize", 16),
            graph=GraphSettings.from_dict(data.get("graphSettings", {})),
        )


@dataclass
class VaultConfig:
    """Contents of .graphnotes/config.json."""

    device_id: str
    created: str  # ISO format timestamp
    version: str = CONFIG_VERSION
    settings: DisplaySettings = field(default_factory=DisplaySettings)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "deviceId": self.device_id,
            "created": self.created,
            "settings": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "VaultConfig":
        return cls(
            device_id=data["deviceId"],
            created=data["created"],
            version=data.get("version", CONFIG_VERSION),
            settings=DisplaySettings.from_dict(data.get("settings", {})),
        )

    @classmethod
    def create(cls) -> "VaultConfig":
        return cls(device_id=str(uuid.uuid4()), created=datetime.now(UTC).isoformat())


def metadata_dir(vault_path: Path) -> Path:
    return Path(vault_path) / METADATA_DIR_NAME


def is_vault(vault_path: Path) -> bool:
    """Check whether `vault_path` holds a metadata directory."""
    return metadata_dir(vault_path).is_dir()


def init_vault(vault_path: Path) -> VaultConfig | None:
    """Create the metadata directory, event log and config record if missing.

    Existing files are left untouched.
    """
    meta_dir = metadata_dir(vault_path)
    meta_dir.mkdir(parents=True, exist_ok=True)

    events_file = meta_dir / EVENTS_FILE_NAME
    if not events_file.exists():
        events_file.write_text("", encoding="utf-8")
        logger.info(f"Created event log: {events_file}")

    config_file = meta_dir / CONFIG_FILE_NAME
    if not config_file.exists():
        config = VaultConfig.create()
        config_file.write_text(
            json.dumps(config.to_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.info(f"Created vault config: {config_file}")
        return config

    return load_vault_config(vault_path)


def load_vault_config(vault_path: Path) -> VaultConfig | None:
    """Load the config record, or None if it is missing or unreadable."""
    config_file = metadata_dir(vault_path) / CONFIG_FILE_NAME
    if not config_file.exists():
        return None

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
        return VaultConfig.from_dict(data)
    except (json.JSONDecodeError, KeyError, OSError) as e:
        logger.warning(f"Failed to load vault config: {e}")
        return None
