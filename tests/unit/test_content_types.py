import pytest

from fileai_mcp.upload.content_types import (
    CONTENT_TYPES,
    DEFAULT_CONTENT_TYPE,
    derive_content_type,
)


class TestMappedExtensions:
    @pytest.mark.parametrize("extension", sorted(CONTENT_TYPES))
    def test_returns_mapped_type(self, extension: str) -> None:
        assert derive_content_type(f"document{extension}") == CONTENT_TYPES[extension]

    def test_extension_is_case_insensitive(self) -> None:
        assert derive_content_type("SCAN.PDF") == "application/pdf"

    def test_uses_last_extension(self) -> None:
        assert derive_content_type("archive.tar.csv") == "text/csv"


class TestFallback:
    @pytest.mark.parametrize("file_name", ["notes.txt", "data.json", "image.gif", "README"])
    def test_unmapped_returns_octet_stream(self, file_name: str) -> None:
        assert derive_content_type(file_name) == DEFAULT_CONTENT_TYPE

    def test_fallback_value(self) -> None:
        assert DEFAULT_CONTENT_TYPE == "application/octet-stream"
