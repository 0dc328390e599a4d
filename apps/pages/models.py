from __future__ import annotations

import copy

from django.db import models

from . import defaults


class Content(models.Model):
    """Editable storefront copy. A single row with id=1."""

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)
    hero_title = models.TextField(null=True, blank=True)
    hero_subtitle = models.TextField(null=True, blank=True)
    process_steps = models.JSONField(null=True, blank=True)
    security_features = models.JSONField(null=True, blank=True)
    faqs = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'content'

    @classmethod
    def load(cls) -> 'Content':
        """Return the content row, creating it from the default copy on first access."""
        obj, _ = cls.objects.get_or_create(
            id=cls.SINGLETON_ID,
            defaults={
                'hero_title': defaults.HERO_TITLE,
                'hero_subtitle': defaults.HERO_SUBTITLE,
                'process_steps': copy.deepcopy(defaults.PROCESS_STEPS),
                'security_features': copy.deepcopy(defaults.SECURITY_FEATURES),
                'faqs': copy.deepcopy(defaults.FAQS),
            },
        )
        return obj

    def __str__(self):
        return self.hero_title or 'Content'


class SocialButton(models.Model):
    """Floating contact button (WhatsApp, Telegram...)."""

    type = models.CharField(max_length=32)
    label = models.CharField(max_length=100)
    url = models.CharField(max_length=500, null=True, blank=True)
    icon_color = models.CharField(max_length=100, null=True, blank=True)
    bg_color = models.CharField(max_length=200, null=True, blank=True)
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'social_buttons'
        ordering = ['sort_order', '-created_at']

    def __str__(self):
        return f"{self.label} ({self.type})"
