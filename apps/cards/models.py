from django.db import models


class SupportedCard(models.Model):
    """Gift-card brand accepted by the platform (Xbox, iTunes, Steam...)."""

    name = models.CharField(max_length=255)
    logo_url = models.CharField(max_length=500, null=True, blank=True)
    description = models.CharField(max_length=500, null=True, blank=True)
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'supported_cards'
        ordering = ['sort_order', '-created_at']

    def __str__(self):
        return self.name
