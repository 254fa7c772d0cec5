from typing import List, Optional


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ) -> None:
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.errors:
            parts.append("Errors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")
        if self.suggestions:
            parts.append("Suggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")
        return "\n".join(parts)


class CatalogLoadError(Exception):
    """A job catalog or salary file could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class LanguageModelError(Exception):
    """The language model call failed or returned an unusable payload."""
