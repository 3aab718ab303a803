"""
PrintSize Backend — API Routes Package
========================================

Route Inventory:
    - upload.py:  POST /upload   (measure an uploaded image)
    - health.py:  GET  /health   (liveness check)

Routes stay thin: they extract data from the request, run the shared
validation, call the image service and return its result.
"""
