"""隐藏输入元素。"""

from typing import ClassVar

from horizontal_tabs.elements.base import BaseElement
from horizontal_tabs.render.element_info import ElementInfo
from horizontal_tabs.schema.element import RenderElement


def pre_render_hidden(element: RenderElement) -> RenderElement:
    """把名称与值写入 `#attributes`，保留已有 class。"""
    attributes = dict(element.get("#attributes", {}))
    attributes["type"] = "hidden"
    if "#name" in element:
        attributes["name"] = element["#name"]
    attributes["value"] = element.get("#value", element.get("#default_value", ""))
    element["#attributes"] = attributes
    return element


class Hidden(BaseElement):
    type_name: ClassVar[str] = "hidden"

    def get_info(self) -> ElementInfo:
        return ElementInfo(
            type_name=self.type_name,
            pre_render=[pre_render_hidden],
            theme="input__hidden",
            is_input=True,
        )
