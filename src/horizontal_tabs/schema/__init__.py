from horizontal_tabs.schema.element import RenderElement, is_property
from horizontal_tabs.schema.form_state import FormState

__all__ = ["FormState", "RenderElement", "is_property"]
