"""
模块名称：details 元素

本模块提供可折叠表单分区元素的最小实现，重点是分组成员的注入逻辑。
主要功能包括：
- 每个 details 元素按其父路径形成一个分组
- 预渲染时把分组成员注入为子元素，并跳过成员在原位置的输出

注意事项：成员副本带 `#group_details` 标记，避免被再次跳过。
"""

from typing import ClassVar

from horizontal_tabs.elements.base import BaseElement
from horizontal_tabs.render.element_info import ElementInfo
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import GROUP_EXISTS, group_key


def pre_render_group(element: RenderElement) -> RenderElement:
    """注入分组成员；已归入分组的成员在原位置不输出。"""
    if "#parents" not in element or "#groups" not in element:
        return element

    groups = element["#groups"]
    group = groups.get(group_key(element["#parents"]))
    if group:
        for key, child in RenderElement(group).children():
            member = child.copy()
            member["#group_details"] = True
            element[key] = member

    group_name = element.get("#group")
    if group_name is not None and not element.get("#group_details"):
        if groups.get(group_name, {}).get(GROUP_EXISTS):
            element["#printed"] = True
    return element


class Details(BaseElement):
    type_name: ClassVar[str] = "details"

    def get_info(self) -> ElementInfo:
        return ElementInfo(
            type_name=self.type_name,
            properties={"#open": False, "#summary_attributes": {}},
            pre_render=[pre_render_group],
            theme_wrappers=["details"],
        )
