"""
Arma la vista de una tabla personalizada: filtros, orden del día,
distancias y el orden temporal del modo preview.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .distances import annotate_distances, find_origin_row, with_origin
from .ordering import ALT1_PREFERRED, alt_day_class, order_rows

DAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']

# Color de etiqueta vencida según el día (0=domingo)
EXPIRED_COLORS = ['Purple', 'Pink', 'Yellow', 'Blue', 'Orange', 'Brown', 'Green']


@dataclass
class ViewFilters:
    search: str = ""
    routes: List[str] = field(default_factory=list)
    hidden_deliveries: List[str] = field(default_factory=list)

    @property
    def active(self):
        return bool(self.search) or bool(self.routes) or bool(self.hidden_deliveries)


def matches_search(row, search):
    needle = search.lower()
    return any(needle in str(value).lower() for value in row.values())


def filter_rows(rows, filters):
    """Aplica ruta (incluye), búsqueda y delivery (oculta), en ese orden."""
    filtered = list(rows)
    if filters.routes:
        filtered = [row for row in filtered if row.get("route") in filters.routes]
    if filters.search:
        filtered = [row for row in filtered if matches_search(row, filters.search)]
    if filters.hidden_deliveries:
        filtered = [row for row in filtered if row.get("delivery") not in filters.hidden_deliveries]
    return filtered


def apply_temp_order(display_rows, row_ids):
    """Reordena según ids; los ids que no están en la vista se descartan."""
    if not row_ids:
        return list(display_rows)
    by_id = {row.get("id"): row for row in display_rows}
    return [by_id[row_id] for row_id in row_ids if row_id in by_id]


def delivery_options(rows):
    """Tipos de delivery distintos, en orden de aparición."""
    seen = []
    for row in rows:
        delivery = row.get("delivery")
        if delivery and delivery not in seen:
            seen.append(delivery)
    return seen


def delivery_off_label(day):
    if alt_day_class(day) == ALT1_PREFERRED:
        return f"Alt 2 ({DAY_NAMES[day]})"
    return f"Alt 1 ({DAY_NAMES[day]})"


def expired_color(day):
    return EXPIRED_COLORS[day]


def compose_custom_table_view(all_rows, table_rows, today, filters=None,
                              preview=False, temp_order: Optional[list] = None):
    """
    Pipeline completo de la vista compartida.

    En modo solo lectura se ignoran filtros y orden temporal.
    Devuelve (display_rows, total_rows) donde total_rows cuenta las filas
    de la tabla incluyendo el origen re-insertado.
    """
    if filters is None or not preview:
        filters = ViewFilters()

    rows = with_origin(all_rows, table_rows)
    origin = find_origin_row(rows)

    visible = [row for row in rows if row.get("active") is not False]
    visible = order_rows(visible, today)
    visible = filter_rows(visible, filters)

    display_rows = annotate_distances(origin, visible, filters.active)

    if preview and temp_order:
        display_rows = apply_temp_order(display_rows, temp_order)

    return display_rows, len(rows)
