from django.db import models


class Trade(models.Model):
    class Status(models.TextChoices):
        COMPLETED = 'completed', 'Completed'
        PROCESSING = 'processing', 'Processing'

    class Meta:
        db_table = 'trades'
        ordering = ['-created_at']

    product_name = models.CharField(max_length=255)
    currency = models.CharField(max_length=16)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    exchange_rate = models.DecimalField(max_digits=10, decimal_places=4)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PROCESSING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.product_name} {self.amount} {self.currency} ({self.status})"
