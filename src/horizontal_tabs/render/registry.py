"""
模块名称：元素类型注册表

本模块维护元素类型标识到描述对象的显式映射，供表单构建器在处理前补全默认属性。
主要功能包括：
- 注册元素描述，支持显式覆盖
- 按类型查找描述与默认属性
- 构建包含内置元素的默认注册表

关键组件：
- `ElementRegistry`
- `build_default_registry`

设计背景：元素类型在启动时显式登记，不依赖运行期扫描发现。
注意事项：重复注册默认抛异常，需显式传入 `override=True` 才会替换。
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from horizontal_tabs.exceptions import ElementRegistrationError, UnknownElementTypeError
from horizontal_tabs.log.logger import logger

if TYPE_CHECKING:
    from horizontal_tabs.render.element_info import ElementInfo
    from horizontal_tabs.settings import Settings


class ElementRegistry:
    """元素类型注册表。

    契约：类型标识唯一；查找未知类型时 `get_info` 抛异常，`defaults` 返回空映射。
    副作用：注册/覆盖时记录调试日志。
    """

    def __init__(self) -> None:
        self._infos: dict[str, ElementInfo] = {}

    def register(self, info: ElementInfo, *, override: bool = False) -> ElementInfo:
        """登记元素描述。

        失败语义：类型已存在且未开启覆盖时抛 `ElementRegistrationError`。
        """
        if info.type_name in self._infos and not override:
            raise ElementRegistrationError(info.type_name)
        self._infos[info.type_name] = info
        logger.debug(f"Registered element type: {info.type_name}")
        return info

    def get_info(self, type_name: str) -> ElementInfo:
        """按类型标识获取描述。"""
        try:
            return self._infos[type_name]
        except KeyError as e:
            raise UnknownElementTypeError(type_name) from e

    def defaults(self, type_name: str) -> dict[str, Any]:
        """返回类型默认属性；未知类型返回空映射。"""
        if type_name not in self._infos:
            logger.warning(f"No element info registered for type '{type_name}'")
            return {}
        return self._infos[type_name].defaults()

    def types(self) -> list[str]:
        return sorted(self._infos)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._infos

    def __iter__(self) -> Iterator[str]:
        return iter(self.types())

    def __len__(self) -> int:
        return len(self._infos)


def build_default_registry(
    settings: Settings | None = None,
    has_visible_children: Callable[[Mapping[str, Any] | None], bool] | None = None,
) -> ElementRegistry:
    """构建包含 `horizontal_tabs`/`details`/`hidden` 的注册表。"""
    from horizontal_tabs.elements.details import Details
    from horizontal_tabs.elements.hidden import Hidden
    from horizontal_tabs.elements.horizontal_tabs import HorizontalTabs

    registry = ElementRegistry()
    registry.register(HorizontalTabs(settings=settings, has_visible_children=has_visible_children).get_info())
    registry.register(Details().get_info())
    registry.register(Hidden().get_info())
    return registry
