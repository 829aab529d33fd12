from databind.core.config import AppConfig, BindingSettings, ConfigManager, GeneralSettings
from databind.core.logging import Log, NullLog, component_log, setup_logging
from databind.core.observable import Observable, Subscription

__all__ = [
    "AppConfig",
    "BindingSettings",
    "ConfigManager",
    "GeneralSettings",
    "Log",
    "NullLog",
    "component_log",
    "setup_logging",
    "Observable",
    "Subscription",
]
