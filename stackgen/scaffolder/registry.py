"""Application template registry.

Maps a resolved template selector to the payload written as the generated
application's ``main.go``.  Presets ship as package data next to this module;
any other selector is read from disk exactly once.  Payload contents are never
inspected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import TemplateNotFound
from .resolver import ExternalFileSelector, Preset, PresetSelector


_PRESET_DIR = Path(__file__).parent / "presets"

PRESET_FILES: dict[Preset, str] = {
    Preset.SIMPLE: "simple.go",
    Preset.MULTI: "multi.go",
}


@dataclass(frozen=True)
class TemplatePayload:
    """An opaque application template and where it came from."""

    content: bytes
    origin: str


class TemplateRegistry:
    """Resolves template selectors to payloads.

    Args:
        read_bytes: Primitive used for external template files.  Defaults to
            ``Path.read_bytes``; tests inject a recorder to count reads.
        preset_dir: Directory holding the packaged preset payloads.
    """

    def __init__(
        self,
        read_bytes: Callable[[Path], bytes] | None = None,
        preset_dir: str | Path | None = None,
    ) -> None:
        self._read_bytes = read_bytes or Path.read_bytes
        self.preset_dir = Path(preset_dir) if preset_dir is not None else _PRESET_DIR

    def resolve(self, selector: PresetSelector | ExternalFileSelector) -> TemplatePayload:
        """Return the payload for *selector*.

        Raises:
            TemplateNotFound: The external file could not be read.
        """
        if isinstance(selector, PresetSelector):
            return self.preset(selector.preset)
        try:
            content = self._read_bytes(selector.path)
        except OSError as exc:
            raise TemplateNotFound(selector.path, exc) from exc
        return TemplatePayload(content=content, origin=str(selector.path))

    def preset(self, preset: Preset) -> TemplatePayload:
        """Return a packaged preset payload."""
        path = self.preset_dir / PRESET_FILES[preset]
        return TemplatePayload(
            content=path.read_bytes(),
            origin=str(PresetSelector(preset=preset)),
        )

    def list_presets(self) -> list[str]:
        """Return the selector strings of every packaged preset."""
        return [str(PresetSelector(preset=p)) for p in Preset]
