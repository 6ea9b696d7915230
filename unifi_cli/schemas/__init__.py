"""
Schemas.

Pydantic models for records the CLI derives itself rather than passing
through from the router.
"""
