"""渲染树序列化工具。"""

from typing import Any

import orjson

from horizontal_tabs.schema.element import RenderElement

# 分组映射引用成员元素本身，只输出分组名以避免循环引用
REFERENCE_PROPERTIES = frozenset({"#groups"})


def _callable_name(value: Any) -> str:
    func = getattr(value, "__func__", value)
    return f"{func.__module__}.{func.__qualname__}"


def serialize_element(value: Any) -> Any:
    """将渲染树转换为可 JSON 序列化的结构。

    契约：
    - 输入：RenderElement 或任意嵌套值
    - 输出：仅含 dict/list/标量的结构；可调用对象转为点分限定名
    - 失败语义：不抛异常
    """
    if isinstance(value, dict):
        return {
            str(key): sorted(item) if key in REFERENCE_PROPERTIES else serialize_element(item)
            for key, item in value.items()
        }
    if isinstance(value, list | tuple | set | frozenset):
        return [serialize_element(item) for item in value]
    if callable(value):
        return _callable_name(value)
    return value


def dumps(element: RenderElement, *, indent: bool = True) -> bytes:
    """使用 orjson 序列化渲染树。"""
    option = orjson.OPT_INDENT_2 if indent else None
    return orjson.dumps(serialize_element(element), option=option)
