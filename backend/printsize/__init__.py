"""
PrintSize Backend — Application Package Initializer
====================================================

What: Marks the `printsize` directory as a Python package.
Why:  Enables module imports like `from printsize.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows a layered architecture shared by every entry point:

    ┌──────────────────────────────────────────────┐
    │  Entry points: FastAPI routes │ serverless   │  ← HTTP concerns only
    ├──────────────────────────────────────────────┤
    │  Services: upload validation, multipart,     │  ← Business logic
    │            metadata resolver, calculator     │
    ├──────────────────────────────────────────────┤
    │  Schemas: ImageMetadata, ImageDimensions     │  ← Pydantic contracts
    └──────────────────────────────────────────────┘

    Both the long-running server and the serverless adapter call the same
    `image_service.process_image()`, so the conversion logic exists once.
"""

__version__ = "1.0.0"
