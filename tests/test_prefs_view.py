"""Unit tests for the read-only preferences view."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from rprefs.core.prefs import PrefsTypeMismatchError, PrefsView


def test_sections_are_projected_from_bundle() -> None:
    bundle = {"general_prefs": {"theme": "dark"}, "history_prefs": {"maxItems": 50}}
    view = PrefsView(bundle)

    assert view.get_general_prefs() == {"theme": "dark"}
    assert view.get_history_prefs() == {"maxItems": 50}


def test_sections_alias_the_bundle_without_copying() -> None:
    general = {"theme": "dark"}
    history = {"maxItems": 50}
    view = PrefsView({"general_prefs": general, "history_prefs": history})

    assert view.get_general_prefs() is general
    assert view.get_history_prefs() is history


def test_empty_bundle_yields_no_sections() -> None:
    view = PrefsView({})

    assert view.get_general_prefs() is None
    assert view.get_history_prefs() is None


def test_missing_section_does_not_affect_the_other() -> None:
    view = PrefsView({"history_prefs": {"maxItems": 10}})

    assert view.get_general_prefs() is None
    assert view.get_history_prefs() == {"maxItems": 10}


def test_null_section_is_treated_as_absent() -> None:
    view = PrefsView(json.loads('{"general_prefs": null, "history_prefs": {}}'))

    assert view.get_general_prefs() is None
    assert view.get_history_prefs() == {}


def test_repeated_reads_return_the_same_object() -> None:
    view = PrefsView({"general_prefs": {"theme": "light"}})

    first = view.get_general_prefs()
    assert all(view.get_general_prefs() is first for _ in range(5))
    assert view.get_history_prefs() is None
    assert view.get_history_prefs() is None


def test_view_never_mutates_the_bundle() -> None:
    bundle = {"general_prefs": {"theme": "dark"}, "other": [1, 2]}
    snapshot = json.dumps(bundle, sort_keys=True)
    view = PrefsView(bundle)

    view.get_general_prefs()
    view.get_history_prefs()

    assert json.dumps(bundle, sort_keys=True) == snapshot
    assert set(bundle) == {"general_prefs", "other"}


def test_view_is_immutable() -> None:
    view = PrefsView({})

    with pytest.raises(AttributeError):
        view.bundle = {"general_prefs": {}}  # type: ignore[misc]


def test_unrelated_keys_are_ignored() -> None:
    view = PrefsView({"source_prefs": {"tabs": 2}, "general_prefs": {"theme": "dark"}})

    assert view.get_general_prefs() == {"theme": "dark"}
    assert view.get_history_prefs() is None


def test_attribute_bundles_are_supported() -> None:
    bundle = json.loads(
        '{"general_prefs": {"theme": "dark"}}',
        object_hook=lambda data: SimpleNamespace(**data),
    )
    view = PrefsView(bundle)

    general = view.get_general_prefs()
    assert general is bundle.general_prefs
    assert general.theme == "dark"
    assert view.get_history_prefs() is None


@pytest.mark.parametrize("bad_value", ["dark", 3, 1.5, True, [1, 2], b"raw"])
def test_non_record_section_raises_type_mismatch(bad_value: object) -> None:
    view = PrefsView({"general_prefs": bad_value, "history_prefs": {"maxItems": 5}})

    with pytest.raises(PrefsTypeMismatchError) as excinfo:
        view.get_general_prefs()

    assert excinfo.value.code == "prefs.type_mismatch"
    assert excinfo.value.details == {
        "field": "general_prefs",
        "observed_type": type(bad_value).__name__,
    }
    assert view.get_history_prefs() == {"maxItems": 5}


def test_type_mismatch_on_history_section() -> None:
    view = PrefsView({"history_prefs": "50"})

    with pytest.raises(PrefsTypeMismatchError) as excinfo:
        view.get_history_prefs()

    assert excinfo.value.details["field"] == "history_prefs"
