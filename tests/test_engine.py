"""Tests for the navigation / search engine."""

import pytest

from risdocs.catalog import Catalog, CodeBlock, Heading, Section, build_default_catalog
from risdocs.engine import NavigationEngine, filter_sections, matches
from risdocs.errors import InconsistentSelectionError, SectionNotFoundError, SelectionError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def scenario_catalog():
    """Two-section catalog with plain-text bodies."""
    return Catalog([
        Section("overview", "Overview", body="RIS is an extended assembly-like language..."),
        Section("memory", "Memory Management", body="MEM READ address"),
    ])


@pytest.fixture
def engine():
    return NavigationEngine(build_default_catalog(), "overview")


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

class TestMatching:
    def test_title_match(self, scenario_catalog):
        section = scenario_catalog.get_by_id("memory")
        assert matches(scenario_catalog, section, "management")

    def test_body_match(self, scenario_catalog):
        section = scenario_catalog.get_by_id("memory")
        assert matches(scenario_catalog, section, "read addr")

    def test_icon_not_searched(self):
        catalog = Catalog([Section("s", "Shell", icon="terminal", body="PRN")])
        assert filter_sections(catalog, "terminal") == []

    def test_structured_body_searched(self):
        catalog = Catalog([
            Section("s", "Syntax", body=(Heading("Print"), CodeBlock("PRN $variable"))),
        ])
        assert filter_sections(catalog, "$VARIABLE") == ["s"]


# ---------------------------------------------------------------------------
# Visibility
# ---------------------------------------------------------------------------

class TestComputeVisibility:
    def test_empty_query_matches_all_in_order(self, engine):
        assert engine.compute_visibility() == list(engine.catalog.ids)

    @pytest.mark.parametrize("query", ["memory", "MEMORY", "MeMoRy"])
    def test_case_insensitive(self, engine, query):
        engine.set_query(query)
        assert "memory" in engine.compute_visibility()

    def test_substring_not_prefix(self, engine):
        engine.set_query("sic instr")
        assert "basic" in engine.compute_visibility()

    def test_no_match(self, engine):
        engine.set_query("zzz")
        assert engine.compute_visibility() == []

    def test_result_in_catalog_order(self, engine):
        engine.set_query("memory")
        assert engine.compute_visibility() == ["overview", "memory", "examples", "errorHandling"]

    def test_set_query_idempotent(self, engine):
        engine.set_query("hlt")
        once = engine.compute_visibility()
        engine.set_query("hlt")
        assert engine.compute_visibility() == once

    def test_query_not_trimmed(self, scenario_catalog):
        engine = NavigationEngine(scenario_catalog, "overview")
        engine.set_query(" mem")
        assert engine.query == " mem"
        assert engine.compute_visibility() == []

    def test_recomputed_after_query_change(self, engine):
        engine.set_query("c++17")
        assert engine.compute_visibility() == ["setup"]
        engine.set_query("proc kill")
        assert engine.compute_visibility() == ["examples"]

    def test_returned_list_is_a_copy(self, engine):
        engine.compute_visibility().clear()
        assert len(engine.compute_visibility()) == len(engine.catalog)

    def test_is_visible(self, engine):
        engine.set_query("shell")
        assert engine.is_visible("examples")
        assert not engine.is_visible("memory")

    def test_scenario(self, scenario_catalog):
        engine = NavigationEngine(scenario_catalog, "overview")
        engine.set_query("mem")
        assert engine.compute_visibility() == ["memory"]
        engine.set_query("")
        assert engine.compute_visibility() == ["overview", "memory"]


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelection:
    def test_default_selection(self, engine):
        assert engine.selection == "overview"
        assert engine.get_active_section().title == "Overview"

    def test_set_selection(self, engine):
        engine.set_selection("setup")
        assert engine.get_active_section().id == "setup"

    def test_selection_independent_of_visibility(self, engine):
        engine.set_selection("memory")
        engine.set_query("shell")
        assert "memory" not in engine.compute_visibility()
        assert engine.get_active_section().id == "memory"

    def test_hidden_section_can_be_selected(self, engine):
        engine.set_query("zzz")
        engine.set_selection("basic")
        assert engine.get_active_section().id == "basic"

    def test_unknown_selection_rejected_atomically(self, engine):
        engine.set_selection("memory")
        with pytest.raises(SectionNotFoundError) as exc_info:
            engine.set_selection("nonexistent")
        assert exc_info.value.section_id == "nonexistent"
        assert engine.get_active_section().id == "memory"

    def test_not_found_is_selection_error(self, engine):
        with pytest.raises(SelectionError):
            engine.set_selection("nonexistent")

    def test_unknown_default_rejected(self, scenario_catalog):
        with pytest.raises(SectionNotFoundError):
            NavigationEngine(scenario_catalog, "setup")

    def test_inconsistent_selection_fails_loudly(self, engine):
        engine._selection = "ghost"
        with pytest.raises(InconsistentSelectionError):
            engine.get_active_section()

    def test_query_and_selection_any_order(self, engine):
        engine.set_query("proc")
        engine.set_selection("examples")
        engine.set_query("")
        engine.set_selection("basic")
        assert engine.snapshot() == {
            "query": "",
            "selection": "basic",
            "visible": list(engine.catalog.ids),
        }
