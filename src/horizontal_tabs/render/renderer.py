"""
模块名称：渲染器

本模块执行元素树的预渲染阶段，输出裁剪后的可打印树。
主要功能包括：
- 跳过已打印或无访问权限的元素
- 依次执行 `#pre_render` 回调
- 递归处理子元素并标记 `#printed`

设计背景：主题模板层不在本包范围内，渲染结果以元素树形式交给调用方。
注意事项：渲染在副本上进行，不修改构建器输出。
"""

from __future__ import annotations

from horizontal_tabs.log.logger import logger
from horizontal_tabs.schema.element import RenderElement


class Renderer:
    """预渲染执行器。"""

    def render(self, element: RenderElement) -> RenderElement | None:
        """渲染单个元素及其子元素。

        契约：
        - 输入：构建器输出的元素
        - 输出：裁剪后的元素副本；不输出时返回 None
        - 副作用：无（回调作用于副本）
        """
        if element.get("#printed"):
            return None
        if element.get("#access") is not None and not element["#access"]:
            return None

        element = element.copy()
        for callback in element.get("#pre_render", []):
            element = callback(element)
        if element.get("#printed"):
            logger.debug(f"Skipped element {element.get('#array_parents', [])}")
            return None

        for key in element.child_keys():
            rendered = self.render(element[key])
            if rendered is None:
                del element[key]
            else:
                element[key] = rendered

        element["#printed"] = True
        return element
