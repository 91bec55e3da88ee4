"""
模块名称：子元素枚举

本模块提供渲染树子元素的可见性判定，供预渲染回调判断分组是否为空。
主要功能包括：
- 判定单个元素是否会被输出
- 枚举可见子元素

设计背景：`value`/`hidden`/`token` 类型不产生可见输出，不应让分组被视为非空。
注意事项：`#access` 未设置或为真值时视为可见。
"""

from collections.abc import Mapping
from typing import Any

from horizontal_tabs.schema.element import RenderElement

INVISIBLE_TYPES = frozenset({"value", "hidden", "token"})


def is_visible_element(element: Mapping[str, Any]) -> bool:
    """判断元素是否会被输出。"""
    if element.get("#type") in INVISIBLE_TYPES:
        return False
    return element.get("#access") is None or bool(element["#access"])


def get_visible_children(element: Mapping[str, Any]) -> dict[str, RenderElement]:
    """返回可见子元素，保持 `#weight` 排序。"""
    if not isinstance(element, RenderElement):
        element = RenderElement(element)
    return {key: child for key, child in element.children() if is_visible_element(child)}


def has_visible_children(element: Mapping[str, Any] | None) -> bool:
    """判断元素是否至少包含一个可见子元素。"""
    if not element:
        return False
    return bool(get_visible_children(element))
