"""Configuration management for nyaa."""

from .manager import ConfigManager, apply_config
from .schema import (
    AppConfig,
    ClientsConfig,
    ClipboardConfig,
    CmdConfig,
    DefaultAppConfig,
    DownloadConfig,
    QbitConfig,
    TransmissionConfig,
)

__all__ = [
    "ConfigManager",
    "apply_config",
    "AppConfig",
    "ClientsConfig",
    "CmdConfig",
    "DefaultAppConfig",
    "QbitConfig",
    "TransmissionConfig",
    "DownloadConfig",
    "ClipboardConfig",
]
