"""
HTTP layer: versioned routers and the JSON error handlers.
"""
