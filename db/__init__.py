"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, transactions, schema initialization
and seed data. This layer is the lowest in the architecture and has no
dependencies on other layers (the seed script aside, which drives the
repositories).
"""
