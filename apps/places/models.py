from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class Place(models.Model):
    """A frequent destination with a suggested fare."""

    place_name = models.CharField(max_length=255)
    default_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'places'
        ordering = ['place_name']
        indexes = [
            models.Index(fields=['place_name'], name='idx_places_place_name'),
        ]

    def __str__(self):
        return self.place_name
