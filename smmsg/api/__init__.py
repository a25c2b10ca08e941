"""
HTTP layer: the smmsg route and its response schemas.
"""
