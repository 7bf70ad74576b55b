import uuid

from django.db import migrations, models
import django.db.models.deletion

import locations.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Row',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('route', models.CharField(blank=True, default='', max_length=100)),
                ('code', models.CharField(blank=True, default='', max_length=50)),
                ('location', models.CharField(blank=True, default='', max_length=255)),
                ('delivery', models.CharField(blank=True, default='', max_length=100)),
                ('delivery_alt', models.CharField(choices=[('normal', 'normal'), ('alt1', 'alt1'), ('alt2', 'alt2'), ('inactive', 'inactive')], default='normal', max_length=10)),
                ('latitude', models.CharField(blank=True, default='', max_length=32)),
                ('longitude', models.CharField(blank=True, default='', max_length=32)),
                ('info', models.TextField(blank=True, default='')),
                ('active', models.BooleanField(default=True)),
                ('marker_color', models.CharField(blank=True, default='', max_length=32)),
                ('qr_code', models.CharField(blank=True, default='', max_length=500)),
                ('position', models.IntegerField(default=0)),
            ],
            options={
                'ordering': ['position', 'code'],
            },
        ),
        migrations.CreateModel(
            name='CustomTable',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('share_id', models.CharField(default=locations.models.generate_share_id, max_length=16, unique=True)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='CustomTableRow',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.IntegerField(default=0)),
                ('custom_table', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='links', to='locations.customtable')),
                ('row', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='table_links', to='locations.row')),
            ],
            options={
                'ordering': ['position'],
                'unique_together': {('custom_table', 'row')},
            },
        ),
        migrations.AddField(
            model_name='customtable',
            name='rows',
            field=models.ManyToManyField(related_name='custom_tables', through='locations.CustomTableRow', to='locations.row'),
        ),
    ]
