"""
Pydantic schema definitions for requests and views.

Request schemas carry declarative validation rules that the services
apply; read schemas are frozen views returned to callers.  Schemas are
separated from the stored records in ``models`` to decouple the API
representation from persistence.
"""
