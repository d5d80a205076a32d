"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive an open connection, run parameterized SQL and return domain objects.
"""
