"""水平标签表单元素。"""

from horizontal_tabs.elements.horizontal_tabs import HorizontalTabs, active_tab_key
from horizontal_tabs.form.builder import FormBuilder
from horizontal_tabs.render.registry import ElementRegistry, build_default_registry
from horizontal_tabs.render.renderer import Renderer
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import FormState

__all__ = [
    "ElementRegistry",
    "FormBuilder",
    "FormState",
    "HorizontalTabs",
    "RenderElement",
    "Renderer",
    "active_tab_key",
    "build_default_registry",
]
