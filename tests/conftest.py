# tests/conftest.py
import itertools

import pytest

_ids = itertools.count(1)


@pytest.fixture
def make_row():
    """Fila en forma de dict (como la devuelve Row.to_dict())."""
    def _make(**overrides):
        row = {
            "id": f"row-{next(_ids)}",
            "route": "R1",
            "code": "1",
            "location": "Stop",
            "delivery": "Daily",
            "deliveryAlt": "normal",
            "latitude": "",
            "longitude": "",
            "info": "",
            "active": True,
            "markerColor": "",
            "qrCode": "",
        }
        row.update(overrides)
        return row
    return _make


@pytest.fixture
def origin(make_row):
    return make_row(location="QL Kitchen", code="0", latitude="0", longitude="0")


@pytest.fixture
def db_row(db):
    from locations.models import Row

    positions = itertools.count()

    def _create(**fields):
        fields.setdefault("position", next(positions))
        return Row.objects.create(**fields)
    return _create
