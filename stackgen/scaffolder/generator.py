"""Project materialization.

Takes a validated ``GenerationRequest`` and writes the six project artifacts
into the target directory in a fixed seven-step sequence:

1. create ``<target>/`` and ``<target>/server/``
2. ``docker-compose.yml``
3. ``compose.sh``
4. ``.env``
5. ``server/Dockerfile``
6. ``server/go.mod``
7. ``server/main.go`` (payload from the template registry, copied verbatim)

The first failing step aborts the run.  Files written before it stay on disk;
there is no rollback.
"""

from __future__ import annotations

import errno
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from stackgen.utils import ensure_dir, write_file

from .artifacts import (
    APPLICATION_MODE,
    APPLICATION_PATH,
    SERVER_DIR,
    TEMPLATED_ARTIFACTS,
    RenderedArtifact,
    Step,
    render_artifact,
)
from .errors import DirectoryCreationFailed, FileWriteFailed, GenerationError
from .registry import TemplateRegistry
from .resolver import GenerationRequest
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


class Outcome(str, Enum):
    """Terminal state of a materialization run."""

    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class MaterializationReport:
    """Result of one run: what was written and, if aborted, where and why."""

    target: Path
    outcome: Outcome = Outcome.COMPLETED
    written: list[Path] = field(default_factory=list)
    failed_step: Step | None = None
    error: GenerationError | None = None

    @property
    def completed(self) -> bool:
        return self.outcome is Outcome.COMPLETED

    def abort(self, step: Step, error: GenerationError) -> None:
        self.outcome = Outcome.ABORTED
        self.failed_step = step
        self.error = error

    def raise_for_error(self) -> None:
        """Re-raise the error of an aborted run; no-op when completed."""
        if self.error is not None:
            raise self.error

    def describe(self) -> str:
        """One-line human-readable summary of the outcome."""
        if self.completed:
            return f"Generated {len(self.written)} files in {self.target}"
        step = self.failed_step.value if self.failed_step else "?"
        return f"Error on generation (step {step}): {self.error}"


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


def _default_make_dirs(path: Path) -> None:
    ensure_dir(path)


class ProjectMaterializer:
    """Renders and writes a project skeleton for a ``GenerationRequest``.

    The filesystem primitives are injectable so callers can embed the
    generator elsewhere (or tests can simulate failures):

    * ``make_dirs(path)`` creates a directory and its parents.
    * ``write_bytes(path, data, mode)`` writes one file with its mode.

    Instances hold no per-run state; one materializer can serve any number of
    independent requests.
    """

    def __init__(
        self,
        registry: TemplateRegistry | None = None,
        renderer: TemplateRenderer | None = None,
        write_bytes: Callable[[Path, bytes, int], None] | None = None,
        make_dirs: Callable[[Path], None] | None = None,
    ) -> None:
        self.registry = registry or TemplateRegistry()
        self.renderer = renderer or TemplateRenderer()
        self._write_bytes = write_bytes or write_file
        self._make_dirs = make_dirs or _default_make_dirs

    # -- Public API --------------------------------------------------------

    def materialize(self, request: GenerationRequest) -> MaterializationReport:
        """Run the seven steps for *request* and report the outcome.

        Generation errors never escape this method; they are recorded on the
        returned report together with the step that failed.  Use
        :meth:`MaterializationReport.raise_for_error` to turn an aborted run
        back into an exception.
        """
        report = MaterializationReport(target=request.target)
        step = Step.CREATE_DIRECTORIES
        try:
            self._create_directories(request.target)

            for spec in TEMPLATED_ARTIFACTS:
                step = spec.step
                artifact = render_artifact(spec, request, self.renderer)
                report.written.append(self._write(request.target, artifact))

            step = Step.APPLICATION
            artifact = self.render_application(request)
            report.written.append(self._write(request.target, artifact))
        except GenerationError as exc:
            report.abort(step, exc)
        return report

    def render_artifacts(self, request: GenerationRequest) -> list[RenderedArtifact]:
        """Render all six artifacts in memory without touching the target.

        The result depends only on the request's parameters, never on its
        target path.
        """
        artifacts = [
            render_artifact(spec, request, self.renderer)
            for spec in TEMPLATED_ARTIFACTS
        ]
        artifacts.append(self.render_application(request))
        return artifacts

    def render_application(self, request: GenerationRequest) -> RenderedArtifact:
        """Resolve the application source through the registry.

        Raises:
            TemplateNotFound: The external template file could not be read.
        """
        payload = self.registry.resolve(request.template)
        return RenderedArtifact(
            step=Step.APPLICATION,
            path=APPLICATION_PATH,
            content=payload.content,
            mode=APPLICATION_MODE,
        )

    # -- Steps -------------------------------------------------------------

    def _create_directories(self, target: Path) -> None:
        try:
            if target.is_dir() and any(target.iterdir()):
                raise FileExistsError(
                    errno.ENOTEMPTY, "target directory is not empty", str(target)
                )
        except OSError as exc:
            raise DirectoryCreationFailed(target, exc) from exc
        for directory in (target, target / SERVER_DIR):
            try:
                self._make_dirs(directory)
            except OSError as exc:
                raise DirectoryCreationFailed(directory, exc) from exc

    def _write(self, target: Path, artifact: RenderedArtifact) -> Path:
        path = target.joinpath(*artifact.path.parts)
        try:
            self._write_bytes(path, artifact.content, artifact.mode)
        except OSError as exc:
            raise FileWriteFailed(path, exc) from exc
        return path
