"""
Trips App - Trip bookkeeping

One record per billable journey: date, customer, destination, fare and
payment status (paid / unpaid).
"""
