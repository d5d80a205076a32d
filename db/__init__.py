"""
db/ - Database Layer
====================
Opens PostgreSQL connections, owns the connection pool and creates the schema.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
