import re
from collections.abc import Callable
from datetime import date


class FilenameComposer:
    """Builds deterministic, filesystem-safe document filenames.

    Format: ``{prefix}{SanitizedName}_{identifier}_{YYYY-MM-DD}.pdf`` with an
    optional ``_Masked`` marker before the extension.
    """

    _UNSAFE_RE = re.compile(r"[^A-Za-z0-9]")
    _PATH_SEPARATOR_RE = re.compile(r"[\\/]")

    def __init__(
        self,
        clock: Callable[[], date] | None = None,
        max_name_length: int = 30,
        masked_marker: str = "_Masked",
        extension: str = ".pdf",
    ) -> None:
        self._clock = clock or date.today
        self._max_name_length = max_name_length
        self._masked_marker = masked_marker
        self._extension = extension

    def compose(
        self,
        subject_name: str | None,
        identifier: str | None,
        masked_suffix: bool = False,
        prefix: str = "",
    ) -> str:
        """Return the filename for a document issued today."""
        name = self.sanitize(subject_name)
        ref = self._safe_identifier(identifier)
        base = f"{prefix}{name}_{ref}_{self._clock().strftime('%Y-%m-%d')}"
        if masked_suffix and not self._signals_masked(prefix):
            base += self._masked_marker
        return base + self._extension

    def sanitize(self, subject_name: str | None) -> str:
        """Replace each non-alphanumeric character with ``_`` and truncate."""
        return self._UNSAFE_RE.sub("_", subject_name or "")[: self._max_name_length]

    def _safe_identifier(self, identifier: str | None) -> str:
        # Identifiers keep their punctuation but never a path separator.
        return self._PATH_SEPARATOR_RE.sub("_", identifier or "")

    def _signals_masked(self, prefix: str) -> bool:
        # Only the caller-supplied prefix counts; subject data never does.
        marker = self._masked_marker.strip("_").lower()
        return bool(marker) and marker in prefix.lower()
