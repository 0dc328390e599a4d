from django.db import models


class Carousel(models.Model):
    """Home page slider entry."""

    title = models.CharField(max_length=255, blank=True, default='', verbose_name='Title')
    subtitle = models.CharField(max_length=255, null=True, blank=True, verbose_name='Subtitle')
    # public path (/images/carousels/...) or external URL
    image_url = models.CharField(max_length=500, verbose_name='Image')
    link_url = models.CharField(max_length=500, null=True, blank=True, verbose_name='Link')
    sort_order = models.IntegerField(default=0, verbose_name='Sort order')
    is_active = models.BooleanField(default=True, verbose_name='Active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carousels'
        ordering = ['sort_order', '-created_at']
        indexes = [
            models.Index(fields=['is_active', 'sort_order'], name='carousels_active_sort_idx'),
        ]

    def __str__(self):
        return self.title or f"Carousel #{self.pk}"


class CompanyImage(models.Model):
    """
    Photo shown in the "about the company" strip.
    At most ``MAX_ACTIVE`` images can be active at the same time.
    """

    MAX_ACTIVE = 3

    title = models.CharField(max_length=255, blank=True, default='', verbose_name='Title')
    description = models.CharField(max_length=500, null=True, blank=True, verbose_name='Description')
    image_url = models.CharField(max_length=500, verbose_name='Image')
    sort_order = models.IntegerField(default=0, verbose_name='Sort order')
    is_active = models.BooleanField(default=True, verbose_name='Active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'company_images'
        ordering = ['sort_order', '-created_at']

    def __str__(self):
        return self.title or f"Company image #{self.pk}"
