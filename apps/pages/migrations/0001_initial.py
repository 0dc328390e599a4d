from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Content',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('hero_title', models.TextField(blank=True, null=True)),
                ('hero_subtitle', models.TextField(blank=True, null=True)),
                ('process_steps', models.JSONField(blank=True, null=True)),
                ('security_features', models.JSONField(blank=True, null=True)),
                ('faqs', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'content',
            },
        ),
        migrations.CreateModel(
            name='SocialButton',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(max_length=32)),
                ('label', models.CharField(max_length=100)),
                ('url', models.CharField(blank=True, max_length=500, null=True)),
                ('icon_color', models.CharField(blank=True, max_length=100, null=True)),
                ('bg_color', models.CharField(blank=True, max_length=200, null=True)),
                ('sort_order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'social_buttons',
                'ordering': ['sort_order', '-created_at'],
            },
        ),
    ]
