"""
模块名称：settings.base

本模块定义水平标签元素的运行配置，集中处理环境变量与默认值。
主要功能包括：
- Settings：统一的运行时配置模型
- get_settings：带缓存的配置访问入口

设计背景：默认标题、前端资源库名等需要在部署层可控，避免硬编码在元素回调中。
注意事项：所有配置项均以 `HORIZONTAL_TABS_` 前缀读取环境变量。
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """水平标签运行配置集合。

    契约：
    - 输入：环境变量 `HORIZONTAL_TABS_*`、构造参数
    - 输出：只读配置对象
    - 副作用：无
    - 失败语义：无效日志级别抛 ValueError
    """

    model_config = SettingsConfigDict(env_prefix="HORIZONTAL_TABS_", extra="ignore")

    dev: bool = False
    """是否以开发模式运行（日志携带调用位置与异常详情）。"""

    log_level: str = "ERROR"
    """默认日志级别。"""

    default_title: str = "Horizontal Tabs"
    """未设置 `#title` 时使用的不可见标题。"""

    library: str = "horizontal_tabs/horizontal-tabs"
    """标签切换所需的前端资源库标识。"""

    active_tab_class: str = "horizontal-tabs__active-tab"
    """隐藏字段上供前端脚本定位的 class。"""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in VALID_LOG_LEVELS:
            msg = f"Invalid log level '{value}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            raise ValueError(msg)
        return value


@lru_cache
def get_settings() -> Settings:
    """返回进程级缓存的配置实例。"""
    return Settings()
