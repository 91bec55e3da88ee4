"""
模块名称：元素描述模型

本模块定义元素类型的声明式描述，用于在处理前为元素补全默认属性与生命周期回调。
主要功能包括：
- 描述默认属性、处理回调、预渲染回调与主题包装器
- 生成以 `#` 为前缀的默认值映射

关键组件：
- `ElementInfo`
- `ProcessCallback` / `PreRenderCallback`

设计背景：元素类型由注册表显式登记，描述对象在启动时构建一次。
注意事项：`defaults()` 每次返回新的列表，避免不同元素共享可变默认值。
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from horizontal_tabs.schema.element import PROPERTY_PREFIX, RenderElement
from horizontal_tabs.schema.form_state import FormState

ProcessCallback = Callable[[RenderElement, FormState, RenderElement], tuple[RenderElement, FormState]]
PreRenderCallback = Callable[[RenderElement], RenderElement]


class ElementInfo(BaseModel):
    """元素类型描述。

    契约：
    - 输入：类型标识、默认属性、回调列表
    - 输出：可合并进元素的默认值映射
    - 副作用：无
    - 失败语义：属性键缺少 `#` 前缀时抛 ValueError
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    type_name: str
    properties: dict[str, Any] = Field(default_factory=dict)
    process: list[ProcessCallback] = Field(default_factory=list)
    pre_render: list[PreRenderCallback] = Field(default_factory=list)
    theme_wrappers: list[str] = Field(default_factory=list)
    theme: str | None = None
    is_input: bool = Field(default=False, serialization_alias="input")

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, value: dict[str, Any]) -> dict[str, Any]:
        for key in value:
            if not key.startswith(PROPERTY_PREFIX):
                msg = f"Element property '{key}' must start with '{PROPERTY_PREFIX}'"
                raise ValueError(msg)
        return value

    def defaults(self) -> dict[str, Any]:
        """返回该类型元素的默认属性。"""
        result: dict[str, Any] = {
            **self.properties,
            "#process": list(self.process),
            "#pre_render": list(self.pre_render),
            "#theme_wrappers": list(self.theme_wrappers),
            "#input": self.is_input,
        }
        if self.theme is not None:
            result["#theme"] = self.theme
        return result
