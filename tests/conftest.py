"""Shared fixtures for horizontal tabs tests."""

import sys

import pytest

from horizontal_tabs.elements.horizontal_tabs import HorizontalTabs
from horizontal_tabs.form.builder import FormBuilder
from horizontal_tabs.log.logger import configure
from horizontal_tabs.render.registry import build_default_registry
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import FormState
from horizontal_tabs.settings import Settings


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog bound to a live stream between tests."""
    yield
    configure(log_level="CRITICAL", cache=False, output_file=sys.stderr)


@pytest.fixture
def settings():
    return Settings(default_title="Horizontal Tabs")


@pytest.fixture
def tabs(settings):
    return HorizontalTabs(settings=settings)


@pytest.fixture
def form_state():
    return FormState()


@pytest.fixture
def builder(settings):
    return FormBuilder(build_default_registry(settings=settings))


@pytest.fixture
def tabs_element():
    """A horizontal tabs element as it looks after defaults and parents are assigned."""
    return RenderElement(
        {
            "#type": "horizontal_tabs",
            "#default_tab": "edit-publication",
            "#parents": ["information"],
            "#array_parents": ["information"],
        }
    )


@pytest.fixture
def example_form():
    """Author and publication details grouped under one horizontal tabs element."""
    return RenderElement(
        {
            "information": {"#type": "horizontal_tabs", "#default_tab": "edit-publication"},
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
