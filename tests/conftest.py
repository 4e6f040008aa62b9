from pathlib import Path

import pytest

from fileai_mcp.config.settings import Settings


@pytest.fixture()
def invoice_pdf(tmp_path: Path) -> Path:
    """A small local file to upload."""
    path = tmp_path / "invoice.pdf"
    path.write_bytes(b"%PDF-1.4 invoice")
    return path


@pytest.fixture()
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings with a fast poll budget and no .env influence."""
    monkeypatch.delenv("FILEAI_API_KEY", raising=False)
    return Settings(
        _env_file=None,
        fileai_api_key="test-key",
        fileai_base_url="https://api.test/v1",
        poll_max_attempts=3,
        poll_interval_seconds=0.0,
    )
