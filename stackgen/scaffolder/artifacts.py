"""The fixed set of generated artifacts.

Each templated artifact declares its output path, permission mode, template
and an explicit ``{slot name: GenerationRequest field}`` mapping.  Only the
mapped fields are handed to the template, so the cross-file agreement of
ports and credentials can be read straight off this table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath

from .resolver import GenerationRequest
from .templates import TemplateRenderer


SERVER_DIR = "server"


class Step(str, Enum):
    """The seven materialization steps, in execution order."""

    CREATE_DIRECTORIES = "create-directories"
    COMPOSE = "compose"
    LAUNCHER = "launcher"
    ENVIRONMENT = "environment"
    BUILD_DESCRIPTOR = "build-descriptor"
    MODULE_DESCRIPTOR = "module-descriptor"
    APPLICATION = "application"


@dataclass(frozen=True)
class ArtifactSpec:
    """How one artifact is rendered from a request."""

    step: Step
    path: PurePosixPath
    template: str
    mode: int = 0o644
    slots: dict[str, str] = field(default_factory=dict)

    def context(self, request: GenerationRequest) -> dict[str, object]:
        """Build the template context from the slot mapping."""
        return {slot: getattr(request, source) for slot, source in self.slots.items()}


@dataclass(frozen=True)
class RenderedArtifact:
    """Final content of one generated file."""

    step: Step
    path: PurePosixPath
    content: bytes
    mode: int


# Slot order of the compose template is admin-UI, database, HTTP.
COMPOSE = ArtifactSpec(
    step=Step.COMPOSE,
    path=PurePosixPath("docker-compose.yml"),
    template="docker-compose.yml.j2",
    slots={
        "admin_ui_port": "admin_ui_port",
        "database_port": "database_port",
        "http_port": "http_port",
    },
)

LAUNCHER = ArtifactSpec(
    step=Step.LAUNCHER,
    path=PurePosixPath("compose.sh"),
    template="compose.sh.j2",
    mode=0o755,
)

ENVIRONMENT = ArtifactSpec(
    step=Step.ENVIRONMENT,
    path=PurePosixPath(".env"),
    template="dotenv.j2",
    slots={
        "username": "username",
        "password": "password",
        "api_key": "api_key",
    },
)

BUILD_DESCRIPTOR = ArtifactSpec(
    step=Step.BUILD_DESCRIPTOR,
    path=PurePosixPath(SERVER_DIR, "Dockerfile"),
    template="server/Dockerfile.j2",
)

MODULE_DESCRIPTOR = ArtifactSpec(
    step=Step.MODULE_DESCRIPTOR,
    path=PurePosixPath(SERVER_DIR, "go.mod"),
    template="server/go.mod.j2",
    slots={"module_name": "module_name"},
)

TEMPLATED_ARTIFACTS: tuple[ArtifactSpec, ...] = (
    COMPOSE,
    LAUNCHER,
    ENVIRONMENT,
    BUILD_DESCRIPTOR,
    MODULE_DESCRIPTOR,
)

APPLICATION_PATH = PurePosixPath(SERVER_DIR, "main.go")
APPLICATION_MODE = 0o644


def render_artifact(
    spec: ArtifactSpec,
    request: GenerationRequest,
    renderer: TemplateRenderer,
) -> RenderedArtifact:
    """Render *spec* for *request*; the result does not depend on the target."""
    text = renderer.render(spec.template, spec.context(request))
    return RenderedArtifact(
        step=spec.step,
        path=spec.path,
        content=text.encode("utf-8"),
        mode=spec.mode,
    )
