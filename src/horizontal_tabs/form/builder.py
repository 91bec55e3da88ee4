"""
模块名称：表单构建器

本模块把声明式表单树处理为可渲染的元素树，并在处理过程中传递表单状态。
主要功能包括：
- 按注册表补全元素默认属性
- 计算 `#parents`/`#array_parents`/`#id`/`#name`
- 依次执行 `#process` 回调并串联状态迁移
- 为输入元素解析 `#value` 并写回状态
- 收集 `#group` 分组并挂载到元素的 `#groups`

关键组件：
- `FormBuilder`
- `html_id` / `input_name`

设计背景：元素回调只声明自身行为，树的遍历、值解析与分组收集集中在构建器中。
注意事项：构建器不会修改传入的表单树，所有元素都在副本上处理。
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from horizontal_tabs.log.logger import logger
from horizontal_tabs.render.registry import ElementRegistry, build_default_registry
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import FormState, group_key

ID_PREFIX = "edit-"
GROUP_FORMING_TYPES = frozenset({"details"})


def html_id(array_parents: Sequence[str]) -> str:
    """由数组路径生成 HTML id，如 `["publication"]` -> `edit-publication`。"""
    return (ID_PREFIX + "-".join(array_parents)).replace("_", "-").replace(" ", "-").lower()


def input_name(parents: Sequence[str]) -> str:
    """由父路径生成表单字段名，如 `["a", "b"]` -> `a[b]`。"""
    head, *rest = parents
    return head + "".join(f"[{part}]" for part in rest)


def walk(element: RenderElement) -> Iterator[RenderElement]:
    """先序遍历元素树。"""
    yield element
    for _, child in element.children():
        yield from walk(child)


class FormBuilder:
    """表单构建器。

    契约：
    - 输入：表单树与（可选）表单状态
    - 输出：处理后的表单树副本与新的表单状态
    - 副作用：记录调试日志
    - 失败语义：未知元素类型仅记录警告；回调异常原样上抛
    """

    def __init__(self, registry: ElementRegistry | None = None) -> None:
        self.registry = registry if registry is not None else build_default_registry()

    def build(self, form: RenderElement, form_state: FormState | None = None) -> tuple[RenderElement, FormState]:
        """构建整棵表单树。

        关键路径（三步）：
        1) 深度优先处理每个元素（默认属性 -> 路径 -> 回调 -> 值）；
        2) 遍历结果树收集分组及成员；
        3) 将分组映射挂到每个带 `#type` 的元素上供预渲染读取。
        """
        form = RenderElement(form)
        form_state = form_state if form_state is not None else FormState()
        form.setdefault("#parents", [])
        form.setdefault("#array_parents", [])

        form, form_state = self._build_element(form, form_state, form)
        form_state = self._collect_groups(form, form_state)
        for element in walk(form):
            if "#type" in element:
                element["#groups"] = form_state.groups

        logger.debug(f"Built form with {len(form_state.groups)} group(s)")
        return form, form_state

    def _build_element(
        self,
        element: RenderElement,
        form_state: FormState,
        complete_form: RenderElement,
    ) -> tuple[RenderElement, FormState]:
        if "#type" in element and not element.get("#defaults_loaded"):
            for key, value in self.registry.defaults(element["#type"]).items():
                element.setdefault(key, value)
            element["#defaults_loaded"] = True

        if not element.get("#processed"):
            for callback in element.get("#process", []):
                element, form_state = callback(element, form_state, complete_form)
            element["#processed"] = True

        if element.get("#input"):
            form_state = self._resolve_value(element, form_state)

        for key in element.child_keys():
            child = element[key].copy()
            child["#array_parents"] = [*element["#array_parents"], key]
            child.setdefault("#tree", element.get("#tree", False))
            if "#parents" not in child:
                child["#parents"] = [*element["#parents"], key] if child["#tree"] else [key]
            child.setdefault("#id", html_id(child["#array_parents"]))
            # 父元素无访问权限时，子元素同样不可访问
            if element.get("#access") is not None and not element["#access"]:
                child["#access"] = False
            child, form_state = self._build_element(child, form_state, complete_form)
            element[key] = child

        return element, form_state

    def _resolve_value(self, element: RenderElement, form_state: FormState) -> FormState:
        """输入元素取值：优先表单状态中的提交值，否则取 `#default_value`。"""
        parents = element["#parents"]
        element.setdefault("#name", input_name(parents))
        if form_state.has_value(parents):
            value = form_state.get_value(parents)
        else:
            value = element.get("#default_value", "")
        element["#value"] = value
        return form_state.with_value(parents, value)

    def _collect_groups(self, form: RenderElement, form_state: FormState) -> FormState:
        for element in walk(form):
            if element.get("#type") in GROUP_FORMING_TYPES:
                form_state = form_state.with_group(group_key(element["#parents"]))
            if element.get("#group") is not None:
                member_key = group_key(element["#array_parents"])
                form_state = form_state.with_group_member(element["#group"], member_key, element)
        return form_state
