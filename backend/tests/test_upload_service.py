"""
PrintSize Backend — Upload Service Unit Tests
===============================================

What:  Tests for request and file-part validation shared by all entry points.
Why:   Both the FastAPI route and the serverless adapter depend on these
       exact rules and messages.
"""

import pytest

from printsize.exceptions import ValidationError
from printsize.services.upload_service import UploadService


class TestContentTypeValidation:

    def setup_method(self):
        self.service = UploadService(max_file_size=1024, require_image_mime=True)

    def test_returns_boundary(self):
        assert self.service.validate_content_type("multipart/form-data; boundary=XYZ") == "XYZ"

    def test_case_insensitive_media_type(self):
        assert self.service.validate_content_type("Multipart/Form-Data; boundary=XYZ") == "XYZ"

    def test_case_insensitive_boundary_parameter(self):
        assert self.service.validate_content_type("multipart/form-data; BOUNDARY=AbC") == "AbC"

    @pytest.mark.parametrize("content_type", [None, "", "application/json", "image/png"])
    def test_non_multipart_rejected(self, content_type):
        with pytest.raises(ValidationError, match="multipart/form-data"):
            self.service.validate_content_type(content_type)

    def test_missing_boundary_rejected(self):
        with pytest.raises(ValidationError, match="Missing boundary"):
            self.service.validate_content_type("multipart/form-data")


class TestBodyValidation:

    def test_empty_body_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            UploadService().validate_body(b"")

    def test_non_empty_body_accepted(self):
        UploadService().validate_body(b"--XYZ--")


class TestFileValidation:

    def setup_method(self):
        self.service = UploadService(max_file_size=1024, require_image_mime=True)

    def test_valid_file_returned_unchanged(self):
        assert self.service.validate_file(b"png bytes", "image/png") == b"png bytes"

    def test_missing_file(self):
        with pytest.raises(ValidationError, match="No file uploaded") as exc_info:
            self.service.validate_file(None, None)
        assert exc_info.value.field == "file"

    def test_empty_file_distinct_from_missing(self):
        with pytest.raises(ValidationError, match="Empty file"):
            self.service.validate_file(b"", "image/png")

    def test_size_at_limit_accepted(self):
        self.service.validate_file(b"x" * 1024, "image/png")

    def test_size_over_limit_rejected(self):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            self.service.validate_file(b"x" * 1025, "image/png")

    @pytest.mark.parametrize("content_type", [None, "", "application/pdf", "text/plain"])
    def test_non_image_type_rejected(self, content_type):
        with pytest.raises(ValidationError, match="must be an image"):
            self.service.validate_file(b"data", content_type)

    def test_image_type_case_insensitive(self):
        self.service.validate_file(b"data", "IMAGE/JPEG")

    def test_mime_check_can_be_disabled(self):
        service = UploadService(max_file_size=1024, require_image_mime=False)

        assert service.validate_file(b"data", "application/octet-stream") == b"data"
        assert service.validate_file(b"data", None) == b"data"
