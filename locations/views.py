# views.py

import functools
import json
import logging
import uuid

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import Max
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods, require_POST

from .composition import (
    ViewFilters,
    compose_custom_table_view,
    delivery_off_label,
    delivery_options,
    expired_color,
    filter_rows,
)
from .distances import row_point
from .geocoding import geocode_address
from .info_codec import INFO_FIELDS, decode_info, encode_info
from .models import CustomTable, Row
from .ordering import DELIVERY_ALT_CHOICES, order_by_code, weekday_today
from .state import load_state, save_state, update_quick_links

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('route', 'code', 'location', 'delivery', 'latitude', 'longitude',
               'info', 'markerColor', 'qrCode')


class PayloadError(ValueError):
    """Datos enviados por el cliente que no se pueden aceptar."""


def _error(message, status=400):
    return JsonResponse({"ok": False, "error": message}, status=status)


def handle_store_errors(view):
    """
    Errores de base de datos -> 500 en JSON, para que el cliente pueda reintentar.
    Errores de validación -> 400.
    """
    @functools.wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except PayloadError as e:
            return _error(str(e), status=400)
        except DatabaseError as e:
            logger.exception("Error de base de datos en %s", request.path)
            return _error(f"Error al guardar los datos: {e}", status=500)
    return wrapper


def _read_json(request):
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise PayloadError("El cuerpo de la solicitud no es JSON válido.")
    if not isinstance(data, dict):
        raise PayloadError("Se esperaba un objeto JSON.")
    return data


def _row_fields_from_payload(data):
    """Convierte el JSON de la API (camelCase) a campos del modelo."""
    fields = {}
    for api_name, field_name in Row.API_FIELDS.items():
        if api_name not in data:
            continue
        value = data[api_name]

        if api_name in TEXT_FIELDS:
            fields[field_name] = "" if value is None else str(value)
        elif api_name == 'deliveryAlt':
            value = value or "normal"
            if value not in DELIVERY_ALT_CHOICES:
                raise PayloadError(f"deliveryAlt inválido: {value}")
            fields[field_name] = value
        elif api_name == 'active':
            if not isinstance(value, bool):
                raise PayloadError("active debe ser true o false.")
            fields[field_name] = value
    return fields


def _text(data, key):
    """Campo de texto opcional del JSON, sin espacios en los extremos."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadError(f"{key} debe ser texto.")
    return value.strip()


def _normalize_id(value):
    """Id en la forma canónica de str(uuid); None si no es un UUID."""
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        return None


def _table_to_dict(request, table):
    data = table.to_dict()
    data['shareUrl'] = request.build_absolute_uri(f"/custom/{table.share_id}")
    data['previewUrl'] = data['shareUrl'] + "?preview=true"
    return data


# --- FILAS ---

@require_http_methods(["GET", "POST"])
@handle_store_errors
def table_rows(request):
    """
    GET: todas las filas en el orden manual de la tabla.
    POST: crea una fila. Si no trae coordenadas, intenta geocodificar la dirección del info.
    """
    if request.method == "GET":
        return JsonResponse([row.to_dict() for row in Row.objects.all()], safe=False)

    row = Row(**_row_fields_from_payload(_read_json(request)))

    if row_point(row.to_dict()) is None:
        address = decode_info(row.info).address.strip()
        coords = geocode_address(address, settings.GOOGLE_MAPS_API_KEY)
        if coords is not None:
            row.latitude, row.longitude = coords

    last = Row.objects.aggregate(last=Max('position'))['last']
    row.position = 0 if last is None else last + 1
    row.save()

    logger.info("Fila creada: %s (%s)", row.location, row.id)
    return JsonResponse(row.to_dict(), status=201)


@require_http_methods(["GET", "PATCH", "DELETE"])
@handle_store_errors
def table_row_detail(request, row_id):
    row = get_object_or_404(Row, id=row_id)

    if request.method == "GET":
        return JsonResponse(row.to_dict())

    if request.method == "DELETE":
        row.delete()
        logger.info("Fila eliminada: %s", row_id)
        return JsonResponse({"ok": True})

    for field_name, value in _row_fields_from_payload(_read_json(request)).items():
        setattr(row, field_name, value)
    row.save()
    return JsonResponse(row.to_dict())


@require_POST
@handle_store_errors
def reorder_rows(request):
    """Guarda el orden manual de la tabla principal (ids desconocidos se ignoran)."""
    row_ids = _read_json(request).get('rowIds')
    if not isinstance(row_ids, list):
        raise PayloadError("rowIds debe ser una lista.")

    wanted = [row_id for row_id in map(_normalize_id, row_ids) if row_id]
    rows_by_id = {str(row.id): row for row in Row.objects.filter(id__in=wanted)}
    reordered = list(dict.fromkeys(rows_by_id[row_id] for row_id in wanted if row_id in rows_by_id))

    with transaction.atomic():
        for position, row in enumerate(reordered):
            row.position = position
            row.save(update_fields=['position'])

    return JsonResponse([row.to_dict() for row in reordered], safe=False)


@require_http_methods(["GET", "PUT"])
@handle_store_errors
def row_info(request, row_id):
    """Lee o escribe el info de una fila como campos separados."""
    row = get_object_or_404(Row, id=row_id)

    if request.method == "PUT":
        data = _read_json(request)
        parts = {field: _text(data, field) for field in INFO_FIELDS}
        row.info = encode_info(parts)
        row.save(update_fields=['info'])

    info = decode_info(row.info)
    return JsonResponse({**info._asdict(), 'info': row.info})


# --- TABLAS PERSONALIZADAS ---

def _validate_table_payload(data):
    """
    Devuelve (name, description, rows) o PayloadError.
    Requiere nombre y al menos una fila; conserva el orden de rowIds.
    """
    name = _text(data, 'name')
    if not name:
        raise PayloadError("Debes ingresar un nombre para la tabla.")

    row_ids = data.get('rowIds') or []
    if not isinstance(row_ids, list) or not row_ids:
        raise PayloadError("Debes seleccionar al menos una ubicación.")

    # "ABC..." y "abc..." son la misma fila
    normalized = {str(row_id): _normalize_id(row_id) for row_id in row_ids}
    rows_by_id = {
        str(row.id): row
        for row in Row.objects.filter(id__in=[row_id for row_id in normalized.values() if row_id])
    }
    missing = [sent for sent, row_id in normalized.items() if row_id not in rows_by_id]
    if missing:
        raise PayloadError(f"Ubicaciones no encontradas: {', '.join(missing)}")

    description = _text(data, 'description')
    rows = dict.fromkeys(rows_by_id[row_id] for row_id in normalized.values())
    return name, description, list(rows)


@require_http_methods(["GET", "POST"])
@handle_store_errors
def custom_tables(request):
    if request.method == "GET":
        tables = [_table_to_dict(request, table) for table in CustomTable.objects.all()]
        return JsonResponse(tables, safe=False)

    name, description, rows = _validate_table_payload(_read_json(request))
    with transaction.atomic():
        table = CustomTable.objects.create(name=name, description=description)
        table.set_rows(rows)

    logger.info("Tabla personalizada creada: %s (%d filas)", table.name, len(rows))
    return JsonResponse(_table_to_dict(request, table), status=201)


@require_http_methods(["GET", "DELETE"])
@handle_store_errors
def custom_table_detail(request, table_id):
    table = get_object_or_404(CustomTable, id=table_id)

    if request.method == "DELETE":
        table.delete()
        logger.info("Tabla personalizada eliminada: %s", table_id)
        return JsonResponse({"ok": True})

    return JsonResponse(_table_to_dict(request, table))


@require_http_methods(["GET"])
@handle_store_errors
def custom_table_by_share(request, share_id):
    table = get_object_or_404(CustomTable, share_id=share_id)
    return JsonResponse(_table_to_dict(request, table))


@require_http_methods(["GET", "PUT"])
@handle_store_errors
def custom_table_rows(request, table_id):
    """
    GET: filas de la tabla en su orden.
    PUT: renombra y reemplaza la membresía.
    """
    table = get_object_or_404(CustomTable, id=table_id)

    if request.method == "PUT":
        name, description, rows = _validate_table_payload(_read_json(request))
        with transaction.atomic():
            table.name = name
            table.description = description
            table.save(update_fields=['name', 'description'])
            table.set_rows(rows)
        return JsonResponse({**_table_to_dict(request, table), 'rows': [row.to_dict() for row in rows]})

    return JsonResponse([row.to_dict() for row in table.ordered_rows()], safe=False)


def _filters_from_query(query):
    return ViewFilters(
        search=query.get('search', '').strip(),
        routes=[route for route in query.getlist('route') if route],
        hidden_deliveries=[delivery for delivery in query.getlist('delivery') if delivery],
    )


@require_http_methods(["GET"])
@handle_store_errors
def custom_table_view(request, share_id):
    """
    Vista compartida de una tabla.

    ?preview=true habilita búsqueda, filtros (route, delivery) y un orden
    temporal (order=id1,id2,...) que no se guarda.
    Sin preview la vista es solo lectura.
    """
    table = get_object_or_404(CustomTable, share_id=share_id)
    preview = request.GET.get('preview') == 'true'
    today = weekday_today()

    all_rows = [row.to_dict() for row in Row.objects.all()]
    table_rows = [row.to_dict() for row in table.ordered_rows()]

    filters = _filters_from_query(request.GET) if preview else ViewFilters()
    temp_order = [row_id for row_id in request.GET.get('order', '').split(',') if row_id]

    display_rows, total = compose_custom_table_view(
        all_rows, table_rows, today,
        filters=filters, preview=preview, temp_order=temp_order,
    )

    # la animación larga solo la primera vez en la sesión
    state = load_state(request.session)
    intro_loading = not state.has_loaded_intro
    if intro_loading:
        state.has_loaded_intro = True
        save_state(request.session, state)

    return JsonResponse({
        'table': _table_to_dict(request, table),
        'mode': 'preview' if preview else 'read-only',
        'rows': display_rows,
        'filteredRowsCount': len(display_rows),
        'totalRowsCount': total,
        'deliveryOptions': delivery_options(table_rows) if preview else [],
        'deliveryOff': delivery_off_label(today),
        'expiredColor': expired_color(today),
        'introLoading': intro_loading,
    })


@require_http_methods(["GET"])
@handle_store_errors
def selection_rows(request):
    """Lista para elegir ubicaciones al crear una tabla: búsqueda + ocultar delivery, orden por código."""
    all_rows = [row.to_dict() for row in Row.objects.all()]
    filters = ViewFilters(
        search=request.GET.get('search', '').strip(),
        hidden_deliveries=[delivery for delivery in request.GET.getlist('delivery') if delivery],
    )
    rows = order_by_code(filter_rows(all_rows, filters))
    return JsonResponse({
        'rows': rows,
        'deliveryOptions': delivery_options(all_rows),
        'shownCount': len(rows),
        'totalCount': len(all_rows),
    })


# --- LINKS RÁPIDOS ---

@require_http_methods(["GET", "POST"])
@handle_store_errors
def quick_links(request):
    state = load_state(request.session)

    if request.method == "POST":
        data = _read_json(request)
        try:
            update_quick_links(state, _text(data, 'shareUrl'), _text(data, 'customUrl'))
        except ValueError as e:
            return _error(str(e), status=400)
        save_state(request.session, state)

    return JsonResponse(state.to_dict())
