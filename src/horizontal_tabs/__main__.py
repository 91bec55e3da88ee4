"""
模块名称：horizontal-tabs 命令行入口

本模块提供查看元素描述与运行示例表单的命令，主要用于排查渲染树结构。
主要功能包括：
- `info`：输出 `horizontal_tabs` 元素的默认属性
- `demo`：构建并渲染作者/出版信息示例表单，可模拟一次提交

注意事项：输出为 JSON，回调以点分限定名表示。
"""

from __future__ import annotations

import orjson
import typer

from horizontal_tabs.elements.horizontal_tabs import active_tab_key
from horizontal_tabs.form.builder import FormBuilder
from horizontal_tabs.render.registry import build_default_registry
from horizontal_tabs.render.renderer import Renderer
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import FormState
from horizontal_tabs.schema.serialize import dumps, serialize_element

app = typer.Typer(help="Horizontal tabs form element tools.", no_args_is_help=True)


def example_form(default_tab: str = "edit-publication") -> RenderElement:
    """作者/出版信息两个 details 组成的示例表单。"""
    return RenderElement(
        {
            "information": {"#type": "horizontal_tabs", "#default_tab": default_tab},
            "author": {
                "#type": "details",
                "#title": "Author",
                "#group": "information",
                "name": {"#type": "textfield", "#title": "Name"},
            },
            "publication": {
                "#type": "details",
                "#title": "Publication",
                "#group": "information",
                "publisher": {"#type": "textfield", "#title": "Publisher"},
            },
        }
    )


@app.command()
def info() -> None:
    """输出 `horizontal_tabs` 元素的默认属性。"""
    registry = build_default_registry()
    payload = serialize_element(registry.defaults("horizontal_tabs"))
    typer.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


@app.command()
def demo(
    default_tab: str = typer.Option("edit-publication", "--default-tab", help="HTML id of the default tab"),
    active_tab: str | None = typer.Option(None, "--active-tab", help="Simulate a submitted active tab"),
    log_level: str = typer.Option("error", "--log-level", help="One of: debug, info, warning, error, critical"),
) -> None:
    """构建并渲染示例表单。"""
    from horizontal_tabs.log.logger import configure

    configure(log_level=log_level, cache=False)

    form_state = FormState()
    if active_tab is not None:
        form_state = form_state.submit({active_tab_key(["information"]): active_tab})

    form, form_state = FormBuilder().build(example_form(default_tab), form_state)
    rendered = Renderer().render(form)

    typer.echo(dumps(rendered if rendered is not None else RenderElement()).decode())
    clean_values = {"clean_values": form_state.clean_values().values}
    typer.echo(orjson.dumps(clean_values, option=orjson.OPT_INDENT_2).decode())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
