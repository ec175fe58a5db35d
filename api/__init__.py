"""HTTP layer: routes, request guards, middleware."""
