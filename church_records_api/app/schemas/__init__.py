"""
Pydantic schema definitions for the stored entities.

Each entity (members, events, donations, etc.) defines a ``*Create``
model holding validated input fields and a ``*Read`` model for the
persisted record.  Python attributes are snake_case; the wire format
uses camelCase aliases.
"""
