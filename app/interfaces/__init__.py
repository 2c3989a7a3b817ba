"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and the request preamble (store and language resolution).
No business logic belongs here. Routes call the content facade
and return responses.
"""
