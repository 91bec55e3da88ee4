"""元素类型基类。"""

from abc import ABC, abstractmethod
from typing import ClassVar

from horizontal_tabs.render.element_info import ElementInfo


class BaseElement(ABC):
    """元素类型基类：子类声明 `type_name` 并返回自身描述。"""

    type_name: ClassVar[str]

    @abstractmethod
    def get_info(self) -> ElementInfo:
        """返回元素默认属性与回调描述。"""
