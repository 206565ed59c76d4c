"""Trade-show lead capture backend (Google Sheets + Google Drive)."""

__version__ = "1.0.0"
