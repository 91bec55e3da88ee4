"""渲染元素实现。

本模块提供表单渲染树的节点类型：以 `#` 开头的键是属性，其余键是子元素。
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

PROPERTY_PREFIX = "#"


def is_property(key: Any) -> bool:
    """判断键是否为属性键（以 `#` 开头）。"""
    return isinstance(key, str) and key.startswith(PROPERTY_PREFIX)


class RenderElement(dict):
    """渲染树节点。

    关键路径（三步）：
    1) 构造或赋值时将子元素位置上的普通 dict 提升为 RenderElement；
    2) 属性键原样保存，不做转换；
    3) 子元素按 `#weight` 稳定排序后遍历。
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        for key, value in self.items():
            if not is_property(key) and isinstance(value, dict) and not isinstance(value, RenderElement):
                super().__setitem__(key, RenderElement(value))

    def __setitem__(self, key, value) -> None:
        """子元素位置上的普通 dict 提升为 RenderElement。"""
        if not is_property(key) and isinstance(value, dict) and not isinstance(value, RenderElement):
            value = RenderElement(value)
        super().__setitem__(key, value)

    def copy(self) -> RenderElement:
        """浅拷贝，保持类型不变。"""
        return RenderElement(self)

    def properties(self) -> dict[str, Any]:
        """返回全部属性键值。"""
        return {key: value for key, value in self.items() if is_property(key)}

    def child_keys(self) -> list[str]:
        """返回子元素键，按 `#weight` 稳定排序。"""
        keys = [key for key, value in self.items() if not is_property(key) and isinstance(value, dict)]
        return sorted(keys, key=lambda key: self[key].get("#weight", 0))

    def children(self) -> Iterator[tuple[str, RenderElement]]:
        """按排序后的顺序遍历 `(key, child)`。"""
        for key in self.child_keys():
            yield key, self[key]
