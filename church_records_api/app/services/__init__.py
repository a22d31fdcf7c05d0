"""
Service layer abstraction.

Each service encapsulates the operations for one entity type.  Services
receive the :class:`~church_records_api.app.core.context.Repositories`
context explicitly, so tests can run every operation against a fresh
database.
"""
