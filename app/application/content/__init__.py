"""
Application layer for the content bounded context.

The content facade, store facade and language resolver coordinate
domain entities and persistence ports. No framework imports allowed.
"""
