# Services package init
"""
Notes API Backend — Services Layer
====================================

What:  Note persistence behind an interface.

Service Inventory:
    - NotePersistenceService (abstract): contract used by NoteHandler
    - SqlAlchemyNoteService: default implementation on the `notes` table
"""
