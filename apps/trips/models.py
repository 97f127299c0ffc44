from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class TripStatus(models.TextChoices):
    PAID = 'paid', 'Paid'
    UNPAID = 'unpaid', 'Unpaid'


class Trip(models.Model):
    """A billable cab journey."""

    date = models.DateField()
    customer_name = models.CharField(max_length=255)
    place = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    status = models.CharField(
        max_length=10,
        choices=TripStatus.choices,
        default=TripStatus.UNPAID
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'trips'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['date'], name='idx_trips_date'),
            models.Index(fields=['status'], name='idx_trips_status'),
        ]

    def __str__(self):
        return f"{self.date} {self.customer_name} -> {self.place}"
