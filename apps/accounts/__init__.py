"""
Accounts App - Session Gate

Single-operator login: one configured username and a SHA-256 password
digest. A successful login marks the operator session and issues JWT tokens
for the operator's Django user.
"""
