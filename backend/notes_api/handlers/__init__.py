# Handlers package init
"""
Notes API Backend — Request Handlers
======================================

What:  The request-handling layer between routes and the persistence service.
How:   NoteHandler checks identity and required parameters, delegates to a
       NotePersistenceService, and shapes the success envelope with the
       functions in responses.py. It raises on failure and never catches.

Module Inventory:
    - notes.py:       NoteHandler (six note operations)
    - responses.py:   Envelope builders (plain functions, no base class)
    - pagination.py:  Lenient page/limit parsing into skip/take
"""
