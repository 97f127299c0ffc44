"""
Places App - Frequent destinations

Named places with a suggested default fare, used to pre-fill the amount of
a new trip through case-insensitive autocomplete.
"""
