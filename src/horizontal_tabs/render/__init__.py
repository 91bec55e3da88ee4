from horizontal_tabs.render.element_info import ElementInfo
from horizontal_tabs.render.registry import ElementRegistry, build_default_registry
from horizontal_tabs.render.renderer import Renderer

__all__ = ["ElementInfo", "ElementRegistry", "Renderer", "build_default_registry"]
