from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ExchangeRate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('currency', models.CharField(max_length=100)),
                ('symbol', models.CharField(max_length=16, unique=True)),
                ('rate', models.DecimalField(decimal_places=8, max_digits=20)),
                ('change', models.DecimalField(decimal_places=8, default=0, max_digits=20)),
                ('change_percent', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('is_primary', models.BooleanField(default=False)),
                ('api_source', models.CharField(blank=True, max_length=64, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'exchange_rates',
                'ordering': ['-updated_at'],
            },
        ),
        migrations.CreateModel(
            name='SystemConfig',
            fields=[
                ('key', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('value', models.TextField()),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'system_config',
            },
        ),
    ]
