from horizontal_tabs.elements.details import Details
from horizontal_tabs.elements.hidden import Hidden
from horizontal_tabs.elements.horizontal_tabs import HorizontalTabs, active_tab_key

__all__ = ["Details", "Hidden", "HorizontalTabs", "active_tab_key"]
