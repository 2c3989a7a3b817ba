"""
Infrastructure adapters for the content bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems: the SQL database and the media filesystem.
"""
