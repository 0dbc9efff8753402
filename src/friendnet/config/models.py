"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, friendnet.toml only contains
overrides. No config file is needed at all for normal use.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from friendnet.domain.graph import DEFAULT_CAPACITY

# --- friendnet.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    max_vertices: int = Field(default=DEFAULT_CAPACITY, ge=1)
    max_name_length: int = Field(default=50, ge=1)


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    graph_name: str = "friendships"
    default_format: str = "dot"
    dot_filename: str = "friendnet.dot"


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    load_sample: bool = False


class FriendnetConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    graph: GraphConfig = Field(default_factory=GraphConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
