"""
services/ - Business Logic Layer
================================
Services own connection scoping and orchestrate repository calls.
Handlers talk to services, never to repositories directly.
"""
