"""Configuration settings for the certificate registry."""

import os
from pathlib import Path


def get_data_dir() -> Path:
    """Get the directory holding the local database from environment variables."""
    default = Path.home() / ".certificate-registry"
    return Path(os.environ.get("REGISTRY_DATA_DIR", str(default)))


def ensure_data_dir() -> Path:
    """Create the data directory if it does not exist yet."""
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_database_uri() -> str:
    """Get database connection URI; falls back to a SQLite file in the data dir."""
    uri = os.environ.get("DATABASE_URL")
    if uri:
        return uri
    return f"sqlite:///{get_data_dir() / 'customers.db'}"


def get_documents_dir() -> Path:
    """Get the directory offered first when saving certificates."""
    default = Path.home() / "Documents"
    return Path(os.environ.get("REGISTRY_DOCUMENTS_DIR", str(default)))


def get_pdf_font_path():
    """Get path to a TTF font with Polish glyphs, or None for the built-in font."""
    path = os.environ.get("REGISTRY_PDF_FONT", "").strip()
    return path or None


def get_api_url():
    """Get API URL from environment variables."""
    host = os.environ.get("API_HOST", "localhost")
    port = int(os.environ.get("API_PORT", "8000"))
    return f"http://{host}:{port}"
