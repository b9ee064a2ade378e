"""HTTP primitives — methods, headers, request, response."""
