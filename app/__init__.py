"""
Storefront Content API: content management for multi-tenant storefronts.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - content: Pages, content boxes, uploaded assets and folder listings,
      scoped per merchant store and language.

Layers:
    - domain: Entities, persistence ports (ABCs), errors, path decoding.
    - application: Content/store facades, language resolution, DTOs,
      capability ports consumed by the HTTP layer.
    - infrastructure: SQL repositories and filesystem storage adapters.
    - interfaces: FastAPI routers, Pydantic schemas, request preamble.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
