"""stackgen configuration.

Typed defaults for every optional generation parameter.  All settings use
Pydantic v2 models so they are validated at construction time and can be
overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field


MAX_PORT = 65535


class PortDefaults(BaseModel):
    """Default host ports for the three generated services.

    The values mirror the upstream defaults of each service so a freshly
    generated project works without extra flags.  They must differ in any real
    deployment, but that is not enforced here.
    """

    database: int = Field(default=27017, ge=0, le=MAX_PORT)
    http: int = Field(default=8080, ge=0, le=MAX_PORT)
    admin_ui: int = Field(default=8081, ge=0, le=MAX_PORT)

    def as_dict(self) -> dict[str, int]:
        """Return a plain ``{service: port}`` mapping."""
        return {
            "database": self.database,
            "http": self.http,
            "admin_ui": self.admin_ui,
        }


class CredentialDefaults(BaseModel):
    """Database credentials shared by every container."""

    username: str = Field(default="admin", min_length=1)
    password: str = Field(default="p455w0rd", min_length=1)


class GeneratorDefaults(BaseModel):
    """Defaults applied to every optional generation parameter.

    Instances are typically created once by the CLI entry point, either with
    the built-in values or through :meth:`from_env`, and their values are then
    used as argparse defaults.
    """

    ports: PortDefaults = Field(default_factory=PortDefaults)
    credentials: CredentialDefaults = Field(default_factory=CredentialDefaults)
    api_key: str = Field(default="sample-abcdef")
    module_name: str = Field(default="my-project", min_length=1)

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Build defaults from environment variables.

        Recognised variables (all optional):
            STACKGEN_DB_PORT, STACKGEN_HTTP_PORT, STACKGEN_UI_PORT,
            STACKGEN_DB_USER, STACKGEN_DB_PASSWORD, STACKGEN_API_KEY,
            STACKGEN_MODULE_NAME.
        """
        port_kwargs: dict[str, Any] = {}
        if os.environ.get("STACKGEN_DB_PORT"):
            port_kwargs["database"] = int(os.environ["STACKGEN_DB_PORT"])
        if os.environ.get("STACKGEN_HTTP_PORT"):
            port_kwargs["http"] = int(os.environ["STACKGEN_HTTP_PORT"])
        if os.environ.get("STACKGEN_UI_PORT"):
            port_kwargs["admin_ui"] = int(os.environ["STACKGEN_UI_PORT"])

        credential_kwargs: dict[str, Any] = {}
        if os.environ.get("STACKGEN_DB_USER"):
            credential_kwargs["username"] = os.environ["STACKGEN_DB_USER"]
        if os.environ.get("STACKGEN_DB_PASSWORD"):
            credential_kwargs["password"] = os.environ["STACKGEN_DB_PASSWORD"]

        extra: dict[str, Any] = {}
        if os.environ.get("STACKGEN_API_KEY"):
            extra["api_key"] = os.environ["STACKGEN_API_KEY"]
        if os.environ.get("STACKGEN_MODULE_NAME"):
            extra["module_name"] = os.environ["STACKGEN_MODULE_NAME"]

        return cls(
            ports=PortDefaults(**port_kwargs),
            credentials=CredentialDefaults(**credential_kwargs),
            **extra,
        )
