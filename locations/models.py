import string
import uuid

from django.db import models
from django.utils.crypto import get_random_string

from .ordering import DELIVERY_ALT_CHOICES, DELIVERY_NORMAL

SHARE_ID_LENGTH = 6
SHARE_ID_CHARS = string.ascii_lowercase + string.digits


def generate_share_id():
    return get_random_string(SHARE_ID_LENGTH, allowed_chars=SHARE_ID_CHARS)


class Row(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    route = models.CharField(max_length=100, blank=True, default="")
    code = models.CharField(max_length=50, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    delivery = models.CharField(max_length=100, blank=True, default="")
    delivery_alt = models.CharField(
        max_length=10,
        choices=[(value, value) for value in DELIVERY_ALT_CHOICES],
        default=DELIVERY_NORMAL,
    )
    # Se guardan como texto: vacío o no numérico = sin coordenadas
    latitude = models.CharField(max_length=32, blank=True, default="")
    longitude = models.CharField(max_length=32, blank=True, default="")
    info = models.TextField(blank=True, default="")  # ver info_codec
    active = models.BooleanField(default=True)
    marker_color = models.CharField(max_length=32, blank=True, default="")
    qr_code = models.CharField(max_length=500, blank=True, default="")
    position = models.IntegerField(default=0)

    class Meta:
        ordering = ['position', 'code']

    # nombre en la API -> campo del modelo
    API_FIELDS = {
        'route': 'route',
        'code': 'code',
        'location': 'location',
        'delivery': 'delivery',
        'deliveryAlt': 'delivery_alt',
        'latitude': 'latitude',
        'longitude': 'longitude',
        'info': 'info',
        'active': 'active',
        'markerColor': 'marker_color',
        'qrCode': 'qr_code',
    }

    def to_dict(self):
        data = {'id': str(self.id)}
        for api_name, field_name in self.API_FIELDS.items():
            data[api_name] = getattr(self, field_name)
        return data

    def __str__(self):
        return f"{self.code} - {self.location}"


class CustomTable(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    share_id = models.CharField(max_length=16, unique=True, default=generate_share_id)
    rows = models.ManyToManyField(Row, through='CustomTableRow', related_name='custom_tables')

    class Meta:
        ordering = ['-created_at']

    def ordered_rows(self):
        return [link.row for link in self.links.select_related('row').order_by('position')]

    def set_rows(self, rows):
        """Reemplaza la membresía conservando el orden recibido."""
        self.links.all().delete()
        CustomTableRow.objects.bulk_create([
            CustomTableRow(custom_table=self, row=row, position=i)
            for i, row in enumerate(rows)
        ])

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'description': self.description,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'shareId': self.share_id,
        }

    def __str__(self):
        return self.name


class CustomTableRow(models.Model):
    custom_table = models.ForeignKey(CustomTable, on_delete=models.CASCADE, related_name='links')
    row = models.ForeignKey(Row, on_delete=models.CASCADE, related_name='table_links')
    position = models.IntegerField(default=0)

    class Meta:
        ordering = ['position']
        unique_together = [('custom_table', 'row')]
