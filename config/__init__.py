"""Конфигурационные модули."""

from .divider_config import DividerConfig
from .report_config import ReportConfig

__all__ = ["DividerConfig", "ReportConfig"]
