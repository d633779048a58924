"""Parameter resolution: raw caller input to an immutable ``GenerationRequest``.

The template selector is parsed exactly once here into a tagged variant
(``PresetSelector`` or ``ExternalFileSelector``) so that nothing downstream
needs to compare selector strings again.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from stackgen.config import MAX_PORT

from .errors import InvalidPort, MissingRequiredField


PRESET_PREFIX = "preset:"


class Preset(str, Enum):
    """Built-in application templates."""

    SIMPLE = "simple"
    MULTI = "multi"


class PresetSelector(BaseModel):
    """Selects one of the packaged application templates."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["preset"] = "preset"
    preset: Preset

    def __str__(self) -> str:
        return f"{PRESET_PREFIX}{self.preset.value}"


class ExternalFileSelector(BaseModel):
    """Selects an application template stored in an arbitrary file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: Path

    def __str__(self) -> str:
        return str(self.path)


TemplateSelector = Annotated[
    Union[PresetSelector, ExternalFileSelector],
    Field(discriminator="kind"),
]


class GenerationRequest(BaseModel):
    """Normalized parameter set driving one generation run."""

    model_config = ConfigDict(frozen=True)

    target: Path
    template: TemplateSelector
    database_port: int = Field(ge=0, le=MAX_PORT)
    http_port: int = Field(ge=0, le=MAX_PORT)
    admin_ui_port: int = Field(ge=0, le=MAX_PORT)
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    api_key: str
    module_name: str = Field(default="my-project", min_length=1)


def parse_selector(text: str) -> PresetSelector | ExternalFileSelector:
    """Turn a selector string into its tagged form.

    Only the exact strings ``preset:simple`` and ``preset:multi`` name a
    preset.  Every other non-empty string, including an unknown
    ``preset:<name>``, is taken as a path to an external template file.

    Raises:
        MissingRequiredField: If *text* is empty or whitespace.
    """
    if not text or not text.strip():
        raise MissingRequiredField("template")
    if text.startswith(PRESET_PREFIX):
        name = text[len(PRESET_PREFIX):]
        for preset in Preset:
            if preset.value == name:
                return PresetSelector(preset=preset)
    return ExternalFileSelector(path=Path(text))


def _check_port(field: str, value: object) -> int:
    # bool is an int subclass but never a meaningful port.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPort(field, value)
    if value < 0 or value > MAX_PORT:
        raise InvalidPort(field, value)
    return value


def resolve_request(
    target: str | Path,
    template: str,
    database_port: int,
    http_port: int,
    admin_ui_port: int,
    username: str,
    password: str,
    api_key: str,
    module_name: str = "my-project",
) -> GenerationRequest:
    """Validate raw input and build a ``GenerationRequest``.

    The API key is accepted as-is; rejecting an empty key is the job of the
    outer command-line boundary.

    Raises:
        MissingRequiredField: Target, template, username, password or module
            name is empty.
        InvalidPort: A port is not an integer within 0-65535.
    """
    if not target or not str(target).strip():
        raise MissingRequiredField("target")
    selector = parse_selector(template)

    ports = {
        "database_port": _check_port("database_port", database_port),
        "http_port": _check_port("http_port", http_port),
        "admin_ui_port": _check_port("admin_ui_port", admin_ui_port),
    }

    for field, value in (
        ("username", username),
        ("password", password),
        ("module_name", module_name),
    ):
        if not value:
            raise MissingRequiredField(field)

    return GenerationRequest(
        target=Path(target),
        template=selector,
        username=username,
        password=password,
        api_key=api_key,
        module_name=module_name,
        **ports,
    )
