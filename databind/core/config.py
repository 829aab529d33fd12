from typing import Any, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .observable import Observable

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    log_dir: Optional[str] = None

class BindingSettings(BaseModel):
    guard_feedback: bool = True   # Drop echoes of the value being pushed into a view
    warn_unresolved: bool = True  # Warn when a key resolves on no viewmodel

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    binding: BindingSettings = Field(default_factory=BindingSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages binding configuration with persistence and reactivity.

    The current ``AppConfig`` lives in the ``settings`` observable; every
    successful ``update`` replaces it with a new validated instance, so
    subscribers (such as binders created with ``Binder.from_config``) see
    each change.
    """
    def __init__(self, filepath: str = "databind.json"):
        self.filepath = filepath
        self.settings: Observable[AppConfig] = Observable(AppConfig())
        self._load()

    @property
    def data(self) -> AppConfig:
        return self.settings.get()

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and publish the new config."""
        current = self.settings.get()
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(current, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        validated = section_obj.model_validate({**section_obj.model_dump(), key: value})
        new_config = current.model_copy(update={section: validated})
        self._save(new_config)
        self.settings.set(new_config)

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self.settings.get(), section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self.settings.set(AppConfig.model_validate(raw))
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self, config: Optional[AppConfig] = None):
        """Persist ``config`` (default: the current one) to JSON file."""
        config = config if config is not None else self.settings.get()
        if self.filepath.endswith('.toml'):
            logger.warning(f"Config {self.filepath} is TOML and read-only; changes last until restart")
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
