"""Error types raised while reading and converting theme files."""

from pathlib import Path


class ThemeGeneratorError(Exception):
    """Base exception carrying the offending file and some context."""

    def __init__(self, message, path=None, details=None, suggestions=()):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path else None
        self.details = dict(details or {})
        self.suggestions = tuple(suggestions)

    def __str__(self):
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self):
        """Convert to dictionary for logging or display."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestions": list(self.suggestions),
        }


class ValidationError(ThemeGeneratorError):
    """Raised before parsing when the path or input size is unacceptable."""


class FileProcessingError(ThemeGeneratorError):
    """Raised when a file cannot be read or a theme cannot be assembled."""
