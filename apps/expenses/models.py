from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class DieselExpense(models.Model):
    """A fuel cost entry."""

    date = models.DateField()
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'diesel_expenses'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['date'], name='idx_diesel_expenses_date'),
        ]

    def __str__(self):
        return f"{self.date} diesel {self.amount}"
