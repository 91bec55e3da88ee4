"""
模块名称：表单状态模型

本模块定义单次表单构建/提交周期内的状态对象，用于在处理回调之间传递提交值与处理元数据。
主要功能包括：
- 按键或父路径读取提交值
- 以显式状态迁移的方式写入值、清理键与分组
- 生成剔除清理键后的“干净”值集合

关键组件：
- `FormState`
- `ValueKey`

设计背景：回调之间共享可变状态难以追踪，改为每次迁移返回新的状态对象。
注意事项：迁移只复制被修改的路径，未修改的嵌套结构与旧状态共享。
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from horizontal_tabs.schema.element import RenderElement

ValueKey = str | Sequence[str]

GROUP_EXISTS = "#group_exists"
GROUP_SEPARATOR = "]["


def group_key(parents: Sequence[str]) -> str:
    """分组名：父路径以 `][` 连接。"""
    return GROUP_SEPARATOR.join(parents)


def _as_path(key: ValueKey) -> list[str]:
    if isinstance(key, str):
        return [key]
    return list(key)


def _set_nested(values: Mapping[str, Any], path: list[str], value: Any) -> dict[str, Any]:
    """沿路径复制映射并写入值，返回新的顶层映射。"""
    result = dict(values)
    head, *rest = path
    if not rest:
        result[head] = value
        return result
    current = result.get(head)
    result[head] = _set_nested(current if isinstance(current, Mapping) else {}, rest, value)
    return result


def _unset_nested(values: Mapping[str, Any], path: list[str]) -> dict[str, Any]:
    result = dict(values)
    head, *rest = path
    if head not in result:
        return result
    if not rest:
        del result[head]
    elif isinstance(result[head], Mapping):
        result[head] = _unset_nested(result[head], rest)
    return result


class FormState(BaseModel):
    """表单状态。

    契约：
    - 输入：提交值、清理键、分组
    - 输出：不可变状态对象；所有 `with_*` 方法返回新实例
    - 副作用：无
    - 失败语义：不抛异常；缺失键按默认值处理
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    values: dict[str, Any] = Field(default_factory=dict)
    """提交值，按元素 `#parents` 路径嵌套。"""

    clean_value_keys: tuple[str, ...] = ()
    """不应进入持久化配置的值键。"""

    groups: dict[str, Any] = Field(default_factory=dict)
    """分组名 -> 分组元素（成员为其子元素）。"""

    def has_value(self, key: ValueKey) -> bool:
        """判断指定键或路径上是否存在值。"""
        current: Any = self.values
        for part in _as_path(key):
            if not isinstance(current, Mapping) or part not in current:
                return False
            current = current[part]
        return True

    def get_value(self, key: ValueKey, default: Any = None) -> Any:
        """读取指定键或路径上的值，缺失时返回 `default`。"""
        current: Any = self.values
        for part in _as_path(key):
            if not isinstance(current, Mapping) or part not in current:
                return default
            current = current[part]
        return current

    def submit(self, values: Mapping[str, Any]) -> FormState:
        """以新提交的值替换当前值集合。"""
        return self.model_copy(update={"values": dict(values)})

    def with_value(self, key: ValueKey, value: Any) -> FormState:
        """写入单个值并返回新状态。"""
        return self.model_copy(update={"values": _set_nested(self.values, _as_path(key), value)})

    def with_clean_value_key(self, key: str) -> FormState:
        """登记一个清理键；重复登记不产生重复项。"""
        if key in self.clean_value_keys:
            return self
        return self.model_copy(update={"clean_value_keys": (*self.clean_value_keys, key)})

    def with_group(self, name: str) -> FormState:
        """声明分组存在。"""
        group = RenderElement(self.groups.get(name, {}))
        group[GROUP_EXISTS] = True
        return self.model_copy(update={"groups": {**self.groups, name: group}})

    def with_group_member(self, name: str, key: str, element: RenderElement) -> FormState:
        """将元素登记为分组成员。"""
        group = RenderElement(self.groups.get(name, {}))
        group[key] = element
        return self.model_copy(update={"groups": {**self.groups, name: group}})

    def clean_values(self) -> FormState:
        """返回剔除全部清理键后的状态。"""
        values = self.values
        for key in self.clean_value_keys:
            values = _unset_nested(values, [key])
        return self.model_copy(update={"values": values})
