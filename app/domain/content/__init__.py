"""
Content bounded context, domain layer.

This module contains all domain logic for storefront content management:
- Pages and content boxes localized per merchant store
- Uploaded assets (images and static files) and folder listings
- Path decoding for asset folder queries
"""
