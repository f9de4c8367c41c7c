# Routes package init
"""
Notes API Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   /api/notes CRUD, listing and search
    - health.py:  GET /health (service health check)

Design Principle:
    Routes are THIN: they resolve the user and the handler through
    dependencies and call one handler method. Presence checks and envelopes
    live in notes_api.handlers; storage lives in notes_api.services.
"""
