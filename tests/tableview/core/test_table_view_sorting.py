from __future__ import annotations

import pytest

from tableview import InvalidSortOrderError, TableView, UnknownSortKeyError
from tableview.core.state import SortOrder

NAMES_ASC = [
    "Battleborne",
    "Blackheart",
    "Dragon Rider",
    "Empire of Angles",
    "Fire Nation",
    "Impossible",
    "Nightwood",
    "One Million Voices",
    "Orion",
    "Shield of Love",
]


def _names(records):
    return [r["name"] for r in records]


def test_sort_by_name_ascending(tracks):
    view = TableView(tracks)
    view.sort_data("name")

    assert _names(view.rendered_data) == NAMES_ASC
    assert view.sort_key == "name"
    assert view.sort_order == "asc"


def test_sort_by_name_descending(tracks):
    view = TableView(tracks)
    view.sort_data("name", "desc")

    assert _names(view.rendered_data) == NAMES_ASC[::-1]
    assert view.sort_order == "desc"


def test_sort_accepts_enum_order(tracks):
    view = TableView(tracks)
    view.sort_data("name", SortOrder.DESC)

    assert _names(view.rendered_data) == NAMES_ASC[::-1]


def test_invalid_sort_order(tracks):
    view = TableView(tracks)

    with pytest.raises(InvalidSortOrderError, match="Invalid sorting order"):
        view.sort_data("name", "TSFH")

    assert view.sort_key is None


def test_invalid_sort_order_is_a_value_error(tracks):
    view = TableView(tracks)

    with pytest.raises(ValueError):
        view.sort_data("name", "XYZ")


def test_unknown_sort_key(tracks):
    view = TableView(tracks)

    with pytest.raises(UnknownSortKeyError) as exc_info:
        view.sort_data("TSFH", "asc")

    assert str(exc_info.value) == 'Key "TSFH" does not exist in the data objects.'
    assert isinstance(exc_info.value, KeyError)
    assert view.rendered_data == tracks


def test_failed_sort_keeps_previous_sort(tracks):
    view = TableView(tracks)
    view.sort_data("name", "desc")

    with pytest.raises(KeyError):
        view.sort_data("unknown_field")

    assert view.sort_key == "name"
    assert view.sort_order == "desc"
    assert _names(view.rendered_data) == NAMES_ASC[::-1]


def test_sort_numeric_ascending_is_stable(tracks):
    view = TableView(tracks)
    view.sort_data("year")

    years = [r["year"] for r in view.rendered_data]
    assert years == sorted(years)
    # equal years keep dataset order
    assert _names(view.rendered_data)[:2] == ["Dragon Rider", "Fire Nation"]
    assert _names(view.rendered_data)[4:6] == ["Empire of Angles", "Battleborne"]


def test_sort_numeric_descending_is_stable(tracks):
    view = TableView(tracks)
    view.sort_data("year", "desc")

    years = [r["year"] for r in view.rendered_data]
    assert years == sorted(years, reverse=True)
    assert _names(view.rendered_data)[-2:] == ["Dragon Rider", "Fire Nation"]


def test_display_the_second_page_sorted(tracks):
    view = TableView(tracks, 5)
    view.sort_data("name")
    view.current_page = 2

    assert _names(view.rendered_data) == NAMES_ASC[5:]


def test_sorting_is_kept_when_switching_pages(tracks):
    view = TableView(tracks, 5)
    view.sort_data("name")
    view.current_page = 2
    view.previous_page()

    assert _names(view.rendered_data) == NAMES_ASC[:5]


def test_sorting_keeps_current_page(tracks):
    view = TableView(tracks, 5)
    view.sort_data("name")
    view.current_page = 2
    assert _names(view.rendered_data) == NAMES_ASC[5:]

    view.previous_page()
    assert _names(view.rendered_data) == NAMES_ASC[:5]

    view.sort_data("name", "desc")
    view.next_page()
    assert view.current_page == 2
    assert _names(view.rendered_data) == [
        "Fire Nation",
        "Empire of Angles",
        "Dragon Rider",
        "Blackheart",
        "Battleborne",
    ]


def test_sorting_is_kept_when_filtering(tracks):
    view = TableView(tracks)
    view.sort_data("name", "desc")
    assert _names(view.rendered_data) == NAMES_ASC[::-1]

    view.filter = 2010

    assert _names(view.rendered_data) == ["Fire Nation", "Dragon Rider"]


def test_sort_applies_to_filtered_records(tracks):
    view = TableView(tracks)
    view.filter = "phoenix"
    view.sort_data("length", "desc")

    assert [r["length"] for r in view.rendered_data] == [5.08, 3.09, 2.59]


def test_reset_filter_keeps_sorting(tracks):
    view = TableView(tracks)
    view.sort_data("name")
    view.filter = "Bergersen"
    view.reset_filter()

    assert _names(view.rendered_data) == NAMES_ASC


def test_reset_sorting(tracks):
    view = TableView(tracks)
    view.sort_data("name", "desc")
    assert _names(view.rendered_data) == NAMES_ASC[::-1]

    view.reset_sorting()

    assert view.rendered_data == tracks
    assert view.sort_key is None
    assert view.sort_order == "asc"


def test_reset_sorting_keeps_filter_and_page(tracks):
    view = TableView(tracks, 2)
    view.filter = "Bergersen"
    view.sort_data("year", "desc")
    view.current_page = 2

    view.reset_sorting()

    assert view.filter == "Bergersen"
    assert view.current_page == 2
    assert _names(view.rendered_data) == ["Empire of Angles", "Impossible"]


def test_sort_mixed_type_column_is_deterministic():
    records = [{"v": "b"}, {"v": 2}, {"v": None}, {"v": 1}, {"v": "a"}]

    first = TableView(records)
    first.sort_data("v")
    second = TableView(list(reversed(records)))
    second.sort_data("v")

    assert first.rendered_data == second.rendered_data
    assert [r["v"] for r in first.rendered_data] == [None, 1, 2, "a", "b"]


def test_sort_on_empty_dataset():
    view = TableView([])
    view.sort_data("anything")

    assert view.rendered_data == []
    assert view.sort_key == "anything"
