from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ConversionConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('r_rate', models.DecimalField(decimal_places=4, default=Decimal('7.13'), max_digits=10)),
                ('service_fee_percent', models.DecimalField(decimal_places=4, default=Decimal('0.03'), max_digits=5)),
                ('ngn_rate', models.DecimalField(decimal_places=4, default=Decimal('200'), max_digits=10)),
                ('ghc_rate', models.DecimalField(decimal_places=4, default=Decimal('1.0'), max_digits=10)),
                ('card_categories', models.JSONField(blank=True, default=dict)),
                ('category_rates', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'conversion_config',
                'ordering': ['id'],
            },
        ),
    ]
