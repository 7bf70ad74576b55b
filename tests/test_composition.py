# tests/test_composition.py
import pytest

from locations.composition import (
    ViewFilters,
    apply_temp_order,
    compose_custom_table_view,
    delivery_off_label,
    delivery_options,
    expired_color,
    filter_rows,
)
from locations.distances import NO_DISTANCE
from locations.geo import great_circle_distance_km as d


def test_filters_active_flag():
    assert not ViewFilters().active
    assert ViewFilters(search="x").active
    assert ViewFilters(routes=["R1"]).active
    assert ViewFilters(hidden_deliveries=["Weekly"]).active


def test_filter_rows(make_row):
    a = make_row(route="R1", location="Mall Norte", delivery="Daily")
    b = make_row(route="R2", location="Mall Sur", delivery="Weekly")
    c = make_row(route="R1", location="Hospital", delivery="Weekly")

    assert filter_rows([a, b, c], ViewFilters(routes=["R1"])) == [a, c]
    assert filter_rows([a, b, c], ViewFilters(search="mall")) == [a, b]
    assert filter_rows([a, b, c], ViewFilters(hidden_deliveries=["Weekly"])) == [a]
    assert filter_rows([a, b, c], ViewFilters(search="MALL", routes=["R2"])) == [b]


def test_search_matches_any_value(make_row):
    a = make_row(info="Av. Siempre Viva 742")
    b = make_row()
    assert filter_rows([a, b], ViewFilters(search="siempre")) == [a]


def test_apply_temp_order(make_row):
    a, b, c = make_row(), make_row(), make_row()
    assert apply_temp_order([a, b, c], [c["id"], "missing", a["id"]]) == [c, a]
    assert apply_temp_order([a, b], []) == [a, b]


def test_delivery_options_unique_in_order(make_row):
    rows = [make_row(delivery="Weekly"), make_row(delivery=""), make_row(delivery="Daily"),
            make_row(delivery="Weekly")]
    assert delivery_options(rows) == ["Weekly", "Daily"]


@pytest.mark.parametrize("day, label", [
    (0, "Alt 2 (Sunday)"), (1, "Alt 2 (Monday)"), (2, "Alt 1 (Tuesday)"), (6, "Alt 1 (Saturday)"),
])
def test_delivery_off_label(day, label):
    assert delivery_off_label(day) == label


def test_expired_color():
    assert [expired_color(day) for day in range(7)] == [
        "Purple", "Pink", "Yellow", "Blue", "Orange", "Brown", "Green",
    ]


def _table(make_row, origin):
    far = make_row(code="2", latitude="0", longitude="2", route="R1")
    near = make_row(code="1", latitude="0", longitude="1", route="R2")
    off = make_row(code="3", latitude="0", longitude="3", active=False)
    return far, near, off


def test_read_only_view_reinserts_origin_and_uses_direct_mode(make_row, origin):
    far, near, off = _table(make_row, origin)
    all_rows = [far, near, off, origin]

    display, total = compose_custom_table_view(
        all_rows, [far, near, off], today=1,
        filters=ViewFilters(search="R1"), preview=False, temp_order=[far["id"]],
    )

    # origen primero (código "0"), inactivas fuera, filtros y orden temporal ignorados
    assert [r["id"] for r in display] == [origin["id"], near["id"], far["id"]]
    assert total == 4
    assert display[2]["kilometer"] == pytest.approx(d(0, 0, 0, 2))


def test_preview_view_with_filters_is_cumulative(make_row, origin):
    far, near, off = _table(make_row, origin)
    a = make_row(code="4", latitude="0", longitude="4", route="R1")

    display, _ = compose_custom_table_view(
        [origin, far, near, off, a], [far, a, near], today=1,
        filters=ViewFilters(routes=["R1"]), preview=True,
    )

    # el origen también es de la ruta R1
    assert [r["id"] for r in display] == [origin["id"], far["id"], a["id"]]
    assert display[0]["kilometer"] == 0
    assert display[1]["kilometer"] == pytest.approx(d(0, 0, 0, 2))
    assert display[2]["kilometer"] == pytest.approx(d(0, 0, 0, 2) + d(0, 2, 0, 4))
    assert display[2]["segmentDistance"] == pytest.approx(d(0, 2, 0, 4))


def test_preview_temp_order_keeps_computed_distances(make_row, origin):
    far, near, _ = _table(make_row, origin)

    display, _ = compose_custom_table_view(
        [origin, far, near], [far, near], today=1,
        preview=True, temp_order=[far["id"], near["id"], origin["id"]],
    )

    assert [r["id"] for r in display] == [far["id"], near["id"], origin["id"]]
    assert display[0]["kilometer"] == pytest.approx(d(0, 0, 0, 2))


def test_view_without_origin(make_row):
    row = make_row(latitude="0", longitude="1")
    display, total = compose_custom_table_view([row], [row], today=3)
    assert display[0]["kilometer"] == NO_DISTANCE
    assert total == 1


def test_empty_table_stays_empty(make_row, origin):
    display, total = compose_custom_table_view([origin], [], today=3)
    assert display == []
    assert total == 0
