"""
Application layer package.

Contains the facades that orchestrate domain logic for the HTTP layer,
and the capability ports those facades implement.
This layer depends on domain ports, never on infrastructure.
"""
