"""配置模块入口。"""

from horizontal_tabs.settings.base import Settings, get_settings

__all__ = ["Settings", "get_settings"]
