"""
Expenses App - Diesel expenses

Fuel cost entries, recorded per day and independent of any trip. They are
subtracted from trip revenue in period reports.
"""
