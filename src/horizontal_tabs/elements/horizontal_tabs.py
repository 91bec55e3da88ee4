"""
模块名称：水平标签元素

本模块提供表单中的水平标签分组元素：所有 `#group` 指向该元素的 details 元素
都会以标签页形式输出，并在表单重新提交（校验失败、预览）后恢复上次选中的标签。

属性：
- `#default_tab`：默认标签对应 details 元素的 HTML id（如 `edit-publication`）。

用法示例::

    form = RenderElement({
        "information": {"#type": "horizontal_tabs", "#default_tab": "edit-publication"},
        "author": {"#type": "details", "#title": "Author", "#group": "information"},
        "publication": {"#type": "details", "#title": "Publication", "#group": "information"},
    })

关键组件：
- `HorizontalTabs`：描述对象与 `process`/`pre_render` 回调
- `active_tab_key`：隐藏字段名计算
- `resolve_default_tab`：从表单状态恢复选中标签

注意事项：隐藏字段名与已有同名表单值冲突时不做检测。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar

from horizontal_tabs.elements.base import BaseElement
from horizontal_tabs.log.logger import logger
from horizontal_tabs.render.attachments import attach_library
from horizontal_tabs.render.children import has_visible_children as default_has_visible_children
from horizontal_tabs.render.element_info import ElementInfo
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import FormState, group_key
from horizontal_tabs.settings import Settings, get_settings

ACTIVE_TAB_SUFFIX = "__active_tab"
PARENTS_SEPARATOR = "__"
THEME_WRAPPERS = ["horizontal_tabs", "form_element"]


def active_tab_key(parents: Sequence[str]) -> str:
    """由元素父路径计算隐藏字段名，如 `["information"]` -> `information__active_tab`。"""
    return PARENTS_SEPARATOR.join(parents) + ACTIVE_TAB_SUFFIX


def resolve_default_tab(default_tab: str, form_state: FormState, key: str) -> str:
    """优先使用表单状态中上次提交的选中标签。"""
    if form_state.has_value(key):
        return form_state.get_value(key)
    return default_tab


class HorizontalTabs(BaseElement):
    """水平标签元素。

    契约：
    - 输入：配置对象与可见性判定函数（均可省略）
    - 输出：`get_info()` 返回的描述对象，回调绑定到当前实例
    - 副作用：无
    """

    type_name: ClassVar[str] = "horizontal_tabs"

    def __init__(
        self,
        settings: Settings | None = None,
        has_visible_children: Callable[[Mapping[str, Any] | None], bool] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.has_visible_children = has_visible_children or default_has_visible_children

    def get_info(self) -> ElementInfo:
        return ElementInfo(
            type_name=self.type_name,
            properties={"#default_tab": ""},
            process=[self.process],
            pre_render=[self.pre_render],
            theme_wrappers=list(THEME_WRAPPERS),
        )

    def pre_render(self, element: RenderElement) -> RenderElement:
        """分组没有可见成员时不输出该元素。"""
        element = element.copy()
        name = group_key(element["#parents"])
        groups = element.get("group", {}).get("#groups", {})
        if not self.has_visible_children(groups.get(name)):
            logger.debug(f"Horizontal tabs '{name}' has no visible children, skipping")
            element["#printed"] = True
        return element

    def process(
        self,
        element: RenderElement,
        form_state: FormState,
        complete_form: RenderElement,  # noqa: ARG002
    ) -> tuple[RenderElement, FormState]:
        """将元素处理为一个标签分组。

        关键路径（三步）：
        1) 注入 details 子元素，使其按普通 details 的方式参与分组；
        2) 补全不可见标题并声明前端资源库；
        3) 注入保存当前标签的隐藏字段，并将其登记为清理键。
        """
        if element.get("#access") is not None and not element["#access"]:
            return element, form_state

        element = element.copy()
        parents = list(element["#parents"])

        element["group"] = {
            "#type": "details",
            "#theme_wrappers": [],
            "#parents": parents,
        }

        # 不可见标题，供辅助技术读取
        if element.get("#title") is None:
            element["#title"] = self.settings.default_title
            element["#title_display"] = "invisible"

        attach_library(element, self.settings.library)

        # 前端脚本把当前标签写入隐藏字段，重新渲染时据此恢复
        name = active_tab_key(parents)
        default_tab = resolve_default_tab(element.get("#default_tab", ""), form_state, name)
        if default_tab != element.get("#default_tab", ""):
            logger.debug(f"Restored active tab '{default_tab}' for '{name}'")
        element["#default_tab"] = default_tab
        element[name] = {
            "#type": "hidden",
            "#parents": [name],
            "#default_value": default_tab,
            "#attributes": {"class": [self.settings.active_tab_class]},
        }
        # 避免选中标签被写入配置表单的持久化值
        form_state = form_state.with_clean_value_key(name)

        return element, form_state
