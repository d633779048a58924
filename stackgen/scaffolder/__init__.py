"""stackgen scaffolder -- renders a complete docker-compose project.

Raw parameters are resolved into an immutable ``GenerationRequest``; the
``ProjectMaterializer`` then writes the compose descriptor, launcher script,
environment file, Dockerfile, go.mod and the application source picked from
the ``TemplateRegistry``.

Quick usage::

    from stackgen.scaffolder import ProjectMaterializer, resolve_request

    request = resolve_request(
        target="/tmp/proj",
        template="preset:simple",
        database_port=27017,
        http_port=8080,
        admin_ui_port=8081,
        username="admin",
        password="p455w0rd",
        api_key="sample-abcdef",
    )
    report = ProjectMaterializer().materialize(request)
    report.raise_for_error()
"""

from stackgen.scaffolder.artifacts import RenderedArtifact, Step
from stackgen.scaffolder.errors import (
    DirectoryCreationFailed,
    FileWriteFailed,
    GenerationError,
    InvalidPort,
    MissingAPIKey,
    MissingRequiredField,
    TemplateNotFound,
)
from stackgen.scaffolder.generator import MaterializationReport, Outcome, ProjectMaterializer
from stackgen.scaffolder.registry import TemplatePayload, TemplateRegistry
from stackgen.scaffolder.resolver import (
    ExternalFileSelector,
    GenerationRequest,
    Preset,
    PresetSelector,
    parse_selector,
    resolve_request,
)
from stackgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DirectoryCreationFailed",
    "ExternalFileSelector",
    "FileWriteFailed",
    "GenerationError",
    "GenerationRequest",
    "InvalidPort",
    "MaterializationReport",
    "MissingAPIKey",
    "MissingRequiredField",
    "Outcome",
    "Preset",
    "PresetSelector",
    "ProjectMaterializer",
    "RenderedArtifact",
    "Step",
    "TemplateNotFound",
    "TemplatePayload",
    "TemplateRegistry",
    "TemplateRenderer",
    "parse_selector",
    "resolve_request",
]
