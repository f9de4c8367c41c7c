# Middleware package init
"""
Notes API Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: every later log line can read the id
    2. Logging: captures response status and duration on the way out
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
