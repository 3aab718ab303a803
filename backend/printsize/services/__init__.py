"""
PrintSize Backend — Services Package
======================================

    - multipart.py:          raw multipart/form-data extraction
    - upload_service.py:     request and file-part validation
    - metadata_service.py:   pixel size + EXIF resolution via Pillow
    - dimension_service.py:  pixels + DPI → millimeters
    - image_service.py:      orchestrates resolve → calculate
"""
