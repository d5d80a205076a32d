"""
handlers/ - Presentation Layer
================================
FastAPI routes. Each handler decodes the HTTP request, delegates to a Service,
and shapes the JSON response. Failures are mapped to statuses in one place.
"""
