"""
Shared module package.

Contains cross-cutting concerns used by the content service:
- Error handling and mapping
- Security headers middleware
- Rate limiting
- Logging configuration
"""
