"""
PrintSize Backend — Middleware Package
========================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [Allow-Origin] → [CORS] → Route Handler

    1. Request ID: correlation ID for every log line of the request
    2. Logging: method, path, status and duration with the request ID
    3. Allow-Origin: Access-Control-Allow-Origin on every response
    4. CORS: Starlette's CORSMiddleware answers preflight requests
"""
