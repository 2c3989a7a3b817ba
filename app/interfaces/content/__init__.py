"""
Content HTTP interface: routers, schemas and request preamble.
"""
