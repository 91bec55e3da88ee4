"""前端资源声明工具。"""

from horizontal_tabs.schema.element import RenderElement


def attach_library(element: RenderElement, library: str) -> RenderElement:
    """向 `#attached["library"]` 追加资源库，已存在时不重复追加。

    注意：总是写入新的 dict/list，不修改与其他元素共享的对象。
    """
    attached = dict(element.get("#attached", {}))
    libraries = list(attached.get("library", []))
    if library not in libraries:
        libraries.append(library)
    attached["library"] = libraries
    element["#attached"] = attached
    return element
