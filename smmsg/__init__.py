"""
smmsg: an HTTP function that validates and sanitizes its request URL
before logging it.
"""
