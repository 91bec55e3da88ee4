"""
模块名称：元素注册相关异常

本模块定义元素类型注册与查找过程中使用的异常类型。
主要功能包括：
- 重复注册元素类型时的结构化错误
- 查找未注册元素类型时的错误

关键组件：
- `ElementRegistrationError`：携带冲突类型名的注册异常
- `UnknownElementTypeError`：携带未知类型名的查找异常

设计背景：注册表在启动时一次性构建，冲突需要尽早暴露。
注意事项：元素回调本身不抛异常，异常仅来自注册表。
"""


class ElementRegistrationError(ValueError):
    """元素类型重复注册异常。

    契约：`type_name` 为冲突的类型标识。
    失败语义：抛出即表示注册表未被修改。
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        msg = f"Element type '{type_name}' is already registered"
        super().__init__(msg)


class UnknownElementTypeError(KeyError):
    """未注册元素类型异常。"""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(type_name)

    def __str__(self) -> str:
        return f"Element type '{self.type_name}' is not registered"
