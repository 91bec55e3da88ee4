from horizontal_tabs.exceptions.element import ElementRegistrationError, UnknownElementTypeError

__all__ = ["ElementRegistrationError", "UnknownElementTypeError"]
