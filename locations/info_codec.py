"""
Codificación del campo "info" de una fila.

El campo guarda tres sub-campos en un solo texto:

    <dirección>|||DESCRIPTION|||<descripción>|||URL|||<url>

Este módulo es el único que debe leer o escribir los separadores.
"""

from collections import namedtuple

DESCRIPTION_SENTINEL = "|||DESCRIPTION|||"
URL_SENTINEL = "|||URL|||"

INFO_FIELDS = ("address", "description", "url")

InfoParts = namedtuple("InfoParts", INFO_FIELDS)


def decode_info(raw):
    """
    Separa el texto empaquetado en (address, description, url).
    Nunca falla: si los separadores vienen desordenados, el texto sobrante
    queda en el sub-campo que lo captura primero.
    Los sub-campos salen sin espacios en los extremos, igual que los guarda
    encode_info.
    """
    raw = raw or ""

    if DESCRIPTION_SENTINEL not in raw:
        address, sep, url = raw.partition(URL_SENTINEL)
        return InfoParts(address.strip(), "", url.strip() if sep else "")

    address, _, rest = raw.partition(DESCRIPTION_SENTINEL)
    description, _, url = rest.partition(URL_SENTINEL)
    return InfoParts(address.strip(), description.strip(), url.strip())


def encode_info(parts):
    """
    Arma el texto empaquetado a partir de un InfoParts o de un dict con
    las llaves address/description/url.
    """
    if not isinstance(parts, InfoParts):
        parts = InfoParts(*(parts.get(field) or "" for field in INFO_FIELDS))

    address = (parts.address or "").strip()
    description = (parts.description or "").strip()
    url = (parts.url or "").strip()

    packed = address
    if description:
        packed += f"{DESCRIPTION_SENTINEL}{description}"
    if url:
        if description:
            packed += f"{URL_SENTINEL}{url}"
        else:
            # sin descripción igual se deja el separador vacío antes de la URL
            packed += f"{DESCRIPTION_SENTINEL}{URL_SENTINEL}{url}"
    elif not description and URL_SENTINEL in address:
        # sin esto, al decodificar se partiría la dirección en address/url
        packed += DESCRIPTION_SENTINEL
    return packed


def replace_info_field(raw, field, value):
    """Cambia un solo sub-campo y devuelve el texto re-empaquetado."""
    if field not in INFO_FIELDS:
        raise ValueError(f"Campo de info desconocido: {field}")
    return encode_info(decode_info(raw)._replace(**{field: value or ""}))
