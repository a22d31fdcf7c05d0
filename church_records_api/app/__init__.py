"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds
configuration, logging, storage and the error hierarchy; ``schemas``
defines the typed entity models; ``services`` contains validation
rules and the CRUD operations; ``api`` exposes those operations over
HTTP.  Each entity type (members, events, donations, contributions,
prayer requests, content) has its own schema, service and router.

The ASGI application is built lazily by :func:`main.create_app` so
that importing this package does not touch the database.
"""
