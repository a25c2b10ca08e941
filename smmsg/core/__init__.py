"""
Core request URL handling: validation, log sanitization, settings and errors.

Validation and sanitization are pure functions with no framework imports,
so they can be reused outside the HTTP layer.
"""
