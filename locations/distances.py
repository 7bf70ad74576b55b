"""
Columna "kilometer" de la tabla.

Sin filtros se mide directo desde el origen (QL Kitchen) a cada fila.
Con filtros activos se acumula la distancia a lo largo de las filas visibles,
en el orden en que aparecen, como si fuera el recorrido del día.
"""

import math

from django.conf import settings

from .geo import great_circle_distance_km

NO_DISTANCE = "—"


def origin_location_name():
    return getattr(settings, "ORIGIN_LOCATION_NAME", "QL Kitchen")


def parse_coordinate(value):
    """Convierte lat/lng a float; None si viene vacío o no es numérico."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def row_point(row):
    lat = parse_coordinate(row.get("latitude"))
    lng = parse_coordinate(row.get("longitude"))
    if lat is None or lng is None:
        return None
    return lat, lng


def is_origin(row):
    return row.get("location") == origin_location_name()


def find_origin_row(rows):
    """Primera fila que funciona como origen, o None."""
    for row in rows:
        if is_origin(row):
            return row
    return None


def with_origin(all_rows, subset):
    """
    Si el subconjunto no está vacío y no trae el origen, lo agrega al
    comienzo (tomado de la tabla completa).
    """
    subset = list(subset)
    if not subset or any(is_origin(row) for row in subset):
        return subset
    origin = find_origin_row(all_rows)
    if origin is None:
        return subset
    return [origin] + subset


def _annotated(row, kilometer, segment_distance):
    return {**row, "kilometer": kilometer, "segmentDistance": segment_distance}


def annotate_distances(origin_row, ordered_rows, filters_active):
    """
    Devuelve filas nuevas con 'kilometer' y 'segmentDistance'.
    Las filas de entrada no se modifican.
    """
    origin_point = row_point(origin_row) if origin_row is not None else None
    if origin_point is None:
        return [_annotated(row, NO_DISTANCE, 0) for row in ordered_rows]

    annotated = []
    cumulative = 0.0
    previous = origin_point

    for row in ordered_rows:
        if is_origin(row):
            # el origen reinicia el recorrido acumulado
            cumulative = 0.0
            previous = origin_point
            annotated.append(_annotated(row, 0, 0))
            continue

        point = row_point(row)
        if point is None:
            annotated.append(_annotated(row, NO_DISTANCE, 0))
            continue

        if not filters_active:
            direct = great_circle_distance_km(*origin_point, *point)
            annotated.append(_annotated(row, direct, direct))
            continue

        segment = great_circle_distance_km(*previous, *point)
        cumulative += segment
        previous = point
        annotated.append(_annotated(row, cumulative, segment))

    return annotated
