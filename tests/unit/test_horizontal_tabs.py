"""
Unit tests for the horizontal tabs element callbacks.

Covers the descriptor accessor, the pre-render visibility check and the
process step that injects the details group and the active tab hidden field.
"""

import pytest

from horizontal_tabs.elements.horizontal_tabs import (
    HorizontalTabs,
    active_tab_key,
    resolve_default_tab,
)
from horizontal_tabs.schema.element import RenderElement
from horizontal_tabs.schema.form_state import FormState


class TestActiveTabKey:
    """Tests for the hidden field name derivation."""

    def test_single_parent(self):
        assert active_tab_key(["information"]) == "information__active_tab"

    def test_nested_parents(self):
        assert active_tab_key(["settings", "display"]) == "settings__display__active_tab"

    def test_distinct_positions_do_not_collide(self):
        assert active_tab_key(["first"]) != active_tab_key(["second"])


class TestGetInfo:
    """Tests for the element descriptor."""

    def test_defaults(self, tabs):
        info = tabs.get_info()

        assert info.type_name == "horizontal_tabs"
        assert info.properties == {"#default_tab": ""}
        assert info.process == [tabs.process]
        assert info.pre_render == [tabs.pre_render]
        assert info.theme_wrappers == ["horizontal_tabs", "form_element"]

    def test_defaults_are_fresh_lists(self, tabs):
        info = tabs.get_info()
        first = info.defaults()
        first["#theme_wrappers"].append("extra")

        assert info.defaults()["#theme_wrappers"] == ["horizontal_tabs", "form_element"]


class TestPreRender:
    """Tests for suppressing empty tab groups."""

    @staticmethod
    def _element(members):
        group = {"#group_exists": True, **members}
        return RenderElement(
            {
                "#parents": ["information"],
                "group": {"#type": "details", "#groups": {"information": group}},
            }
        )

    def test_no_visible_children_marks_printed(self, tabs):
        element = tabs.pre_render(self._element({}))

        assert element["#printed"] is True

    def test_missing_group_marks_printed(self, tabs):
        element = RenderElement({"#parents": ["information"], "group": {"#groups": {}}})

        assert tabs.pre_render(element)["#printed"] is True

    def test_only_hidden_or_denied_members_marks_printed(self, tabs):
        element = self._element(
            {
                "token": {"#type": "hidden"},
                "author": {"#type": "details", "#access": False},
            }
        )

        assert tabs.pre_render(element)["#printed"] is True

    def test_truthy_access_counts_as_visible(self, tabs):
        element = tabs.pre_render(self._element({"author": {"#type": "details", "#access": 1}}))

        assert "#printed" not in element

    def test_does_not_mutate_input(self, tabs):
        element = self._element({})

        result = tabs.pre_render(element)

        assert result["#printed"] is True
        assert "#printed" not in element
        assert result is not element

    def test_visible_child_leaves_printed_unset(self, tabs):
        element = tabs.pre_render(self._element({"author": {"#type": "details", "#title": "Author"}}))

        assert "#printed" not in element

    def test_uses_injected_visibility_check(self, settings):
        seen = []

        def never_visible(group):
            seen.append(group)
            return False

        tabs = HorizontalTabs(settings=settings, has_visible_children=never_visible)
        element = tabs.pre_render(self._element({"author": {"#type": "details"}}))

        assert element["#printed"] is True
        assert "author" in seen[0]


class TestProcess:
    """Tests for the process step."""

    def test_injects_details_group(self, tabs, tabs_element, form_state):
        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["group"] == {
            "#type": "details",
            "#theme_wrappers": [],
            "#parents": ["information"],
        }
        assert isinstance(element["group"], RenderElement)

    def test_hidden_field_named_after_parents(self, tabs, tabs_element, form_state):
        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        hidden = element["information__active_tab"]
        assert hidden["#type"] == "hidden"
        assert hidden["#default_value"] == "edit-publication"
        assert hidden["#attributes"] == {"class": ["horizontal-tabs__active-tab"]}

    def test_submitted_value_overrides_default_tab(self, tabs, tabs_element):
        form_state = FormState(values={"information__active_tab": "edit-author"})

        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["#default_tab"] == "edit-author"
        assert element["information__active_tab"]["#default_value"] == "edit-author"

    def test_restores_edit_publication(self, tabs, form_state):
        element = RenderElement({"#parents": ["information"], "#default_tab": ""})
        form_state = form_state.with_value("information__active_tab", "edit-publication")

        element, _ = tabs.process(element, form_state, RenderElement())

        assert element["#default_tab"] == "edit-publication"

    def test_missing_title_gets_invisible_default(self, tabs, tabs_element, form_state):
        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["#title"] == "Horizontal Tabs"
        assert element["#title_display"] == "invisible"

    def test_none_title_is_treated_as_missing(self, tabs, tabs_element, form_state):
        tabs_element["#title"] = None

        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["#title"] == "Horizontal Tabs"

    def test_existing_title_is_kept(self, tabs, tabs_element, form_state):
        tabs_element["#title"] = "Book details"

        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["#title"] == "Book details"
        assert "#title_display" not in element

    def test_configured_title(self, tabs_element, form_state):
        from horizontal_tabs.settings import Settings

        tabs = HorizontalTabs(settings=Settings(default_title="Sections"))
        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["#title"] == "Sections"

    def test_attaches_library(self, tabs, tabs_element, form_state):
        tabs_element["#attached"] = {"library": ["core/drupal"]}

        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert element["#attached"]["library"] == ["core/drupal", "horizontal_tabs/horizontal-tabs"]
        assert tabs_element["#attached"]["library"] == ["core/drupal"]

    def test_registers_clean_value_key(self, tabs, tabs_element, form_state):
        _, new_state = tabs.process(tabs_element, form_state, RenderElement())

        assert "information__active_tab" in new_state.clean_value_keys
        assert form_state.clean_value_keys == ()

    @pytest.mark.parametrize("access", [False, 0])
    def test_access_denied_returns_element_unchanged(self, tabs, tabs_element, form_state, access):
        tabs_element["#access"] = access
        before = dict(tabs_element)

        element, new_state = tabs.process(tabs_element, form_state, RenderElement())

        assert element is tabs_element
        assert element == before
        assert "group" not in element
        assert "information__active_tab" not in element
        assert new_state is form_state

    def test_access_granted_is_processed(self, tabs, tabs_element, form_state):
        tabs_element["#access"] = True

        element, _ = tabs.process(tabs_element, form_state, RenderElement())

        assert "group" in element

    def test_input_element_is_not_mutated(self, tabs, tabs_element, form_state):
        before = dict(tabs_element)

        tabs.process(tabs_element, form_state, RenderElement())

        assert tabs_element == before


class TestResolveDefaultTab:
    def test_without_submission(self):
        assert resolve_default_tab("edit-author", FormState(), "information__active_tab") == "edit-author"

    def test_with_submission(self):
        state = FormState(values={"information__active_tab": "edit-publication"})

        assert resolve_default_tab("edit-author", state, "information__active_tab") == "edit-publication"
