"""
Orden de las filas según el día de la semana.

Los días se cuentan como en el calendario de reparto: 0=domingo ... 6=sábado.
"""

import re
import unicodedata

from django.utils import timezone

DELIVERY_NORMAL = "normal"
DELIVERY_ALT1 = "alt1"
DELIVERY_ALT2 = "alt2"
DELIVERY_INACTIVE = "inactive"

DELIVERY_ALT_CHOICES = (DELIVERY_NORMAL, DELIVERY_ALT1, DELIVERY_ALT2, DELIVERY_INACTIVE)

ALT1_PREFERRED = "alt1-preferred"
ALT2_PREFERRED = "alt2-preferred"

ALT1_DAYS = {1, 3, 5, 0}   # lun, mié, vie, dom
ALT2_DAYS = {2, 4, 6}      # mar, jue, sáb

# números, palabras, o un signo suelto
_CHUNK_RE = re.compile(r"(\d+)|([^\W\d_]+)|(.)", re.DOTALL)


def weekday_today():
    """Día local de hoy, 0=domingo ... 6=sábado."""
    # isoweekday(): lunes=1 ... domingo=7
    return timezone.localdate().isoweekday() % 7


def alt_day_class(day):
    if day in ALT2_DAYS:
        return ALT2_PREFERRED
    return ALT1_PREFERRED


def natural_code_key(code):
    """
    Llave para comparar códigos como lo hace un humano: "9" < "10",
    sin distinguir mayúsculas ni acentos.
    Signos y espacios van antes que los números, y los números antes que
    las letras: "A-1" < "A1" < "AB".
    """
    text = unicodedata.normalize("NFKD", str(code or ""))
    text = "".join(ch for ch in text if not unicodedata.combining(ch)).casefold()

    key = []
    for digits, word, sign in _CHUNK_RE.findall(text):
        if digits:
            key.append((1, int(digits), ""))
        elif word:
            key.append((2, 0, word))
        else:
            key.append((0, 0, sign))
    return tuple(key)


def delivery_rank(delivery_alt, preference):
    """
    0 = se reparte hoy (normal o el alterno preferido),
    1 = alterno que no toca hoy, 2 = inactivo.
    """
    delivery_alt = delivery_alt or DELIVERY_NORMAL
    if delivery_alt == DELIVERY_INACTIVE:
        return 2
    if preference == ALT1_PREFERRED and delivery_alt == DELIVERY_ALT2:
        return 1
    if preference == ALT2_PREFERRED and delivery_alt == DELIVERY_ALT1:
        return 1
    return 0


def order_rows(rows, today, day_class=alt_day_class):
    """
    Devuelve una lista nueva con las filas ordenadas:
    primero por prioridad de reparto del día, luego por código.
    El orden es estable para filas empatadas.
    """
    preference = day_class(today)
    return sorted(
        rows,
        key=lambda row: (
            delivery_rank(row.get("deliveryAlt"), preference),
            natural_code_key(row.get("code")),
        ),
    )


def order_by_code(rows):
    """Solo por código, sin mirar el día (lista de selección)."""
    return sorted(rows, key=lambda row: natural_code_key(row.get("code")))
