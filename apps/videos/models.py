from django.db import models


class Video(models.Model):
    class Type(models.TextChoices):
        COMPANY = 'company', 'Company introduction'
        BUSINESS = 'business', 'Business introduction'

    title = models.CharField(max_length=255, blank=True, default='')
    description = models.TextField(null=True, blank=True)
    # /videos/<file> or an external URL
    video_url = models.CharField(max_length=500)
    thumbnail_url = models.CharField(max_length=500, null=True, blank=True)
    type = models.CharField(max_length=16, choices=Type.choices, default=Type.COMPANY)
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'videos'
        ordering = ['sort_order', '-created_at']

    def __str__(self):
        return self.title or self.video_url
