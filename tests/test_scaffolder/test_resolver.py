"""Tests for parameter resolution.

Covers:
- Template selector parsing into the tagged variant
- Required field checks (target, template, credentials)
- Port range validation at the 16-bit boundaries
- Immutability of the resulting GenerationRequest
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from stackgen.scaffolder.errors import InvalidPort, MissingRequiredField
from stackgen.scaffolder.resolver import (
    ExternalFileSelector,
    GenerationRequest,
    Preset,
    PresetSelector,
    parse_selector,
    resolve_request,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# parse_selector
# ---------------------------------------------------------------------------


class TestParseSelector:
    def test_simple_preset(self):
        assert parse_selector("preset:simple") == PresetSelector(preset=Preset.SIMPLE)

    def test_multi_preset(self):
        assert parse_selector("preset:multi") == PresetSelector(preset=Preset.MULTI)

    def test_file_path(self):
        selector = parse_selector("./templates/main.go")
        assert isinstance(selector, ExternalFileSelector)
        assert selector.path == Path("./templates/main.go")

    def test_unknown_preset_is_a_file_path(self):
        selector = parse_selector("preset:fancy")
        assert selector == ExternalFileSelector(path=Path("preset:fancy"))

    def test_legacy_names_are_file_paths(self):
        assert isinstance(parse_selector("default:simple"), ExternalFileSelector)

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_selector(self, text: str):
        with pytest.raises(MissingRequiredField) as exc_info:
            parse_selector(text)
        assert exc_info.value.field == "template"

    def test_str_roundtrip(self):
        assert str(parse_selector("preset:multi")) == "preset:multi"
        assert str(parse_selector("/tmp/main.go")) == "/tmp/main.go"


# ---------------------------------------------------------------------------
# resolve_request
# ---------------------------------------------------------------------------


class TestResolveRequest:
    def test_defaults(self, default_request: GenerationRequest, target_dir: Path):
        assert default_request.target == target_dir
        assert default_request.template == PresetSelector(preset=Preset.SIMPLE)
        assert default_request.database_port == 27017
        assert default_request.http_port == 8080
        assert default_request.admin_ui_port == 8081
        assert default_request.username == "admin"
        assert default_request.password == "p455w0rd"
        assert default_request.api_key == "sample-abcdef"
        assert default_request.module_name == "my-project"

    def test_string_target_becomes_path(self, make_request):
        request = make_request(target="/tmp/proj")
        assert request.target == Path("/tmp/proj")

    def test_empty_target(self, make_request):
        with pytest.raises(MissingRequiredField) as exc_info:
            make_request(target="")
        assert exc_info.value.field == "target"

    def test_empty_template(self, make_request):
        with pytest.raises(MissingRequiredField) as exc_info:
            make_request(template="")
        assert exc_info.value.field == "template"

    @pytest.mark.parametrize("field", ["username", "password", "module_name"])
    def test_empty_credentials(self, make_request, field: str):
        with pytest.raises(MissingRequiredField) as exc_info:
            make_request(**{field: ""})
        assert exc_info.value.field == field

    def test_empty_api_key_is_accepted_here(self, make_request):
        assert make_request(api_key="").api_key == ""

    @pytest.mark.parametrize("port", [0, 1, 65535])
    def test_boundary_ports_accepted(self, make_request, port: int):
        request = make_request(database_port=port, http_port=port, admin_ui_port=port)
        assert (request.database_port, request.http_port, request.admin_ui_port) == (
            port,
            port,
            port,
        )

    @pytest.mark.parametrize(
        "field", ["database_port", "http_port", "admin_ui_port"]
    )
    @pytest.mark.parametrize("value", [65536, -1, 100000])
    def test_out_of_range_ports(self, make_request, field: str, value: int):
        with pytest.raises(InvalidPort) as exc_info:
            make_request(**{field: value})
        assert exc_info.value.field == field
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", ["8080", 80.0, True, None])
    def test_non_integer_ports(self, make_request, value):
        with pytest.raises(InvalidPort):
            make_request(http_port=value)

    def test_invalid_port_does_not_touch_disk(self, make_request, target_dir: Path):
        with pytest.raises(InvalidPort):
            make_request(http_port=65536)
        assert not target_dir.exists()

    def test_same_ports_are_not_rejected(self, make_request):
        request = make_request(database_port=9000, http_port=9000, admin_ui_port=9000)
        assert request.http_port == 9000

    def test_request_is_frozen(self, default_request: GenerationRequest):
        with pytest.raises(ValidationError):
            default_request.http_port = 1
