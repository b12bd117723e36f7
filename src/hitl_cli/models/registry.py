"""Installation registry models.

The registry is persisted as JSON with camelCase keys:

    {"version": "1.0.0",
     "installations": [{"id": ..., "installedPath": ..., "installedAt": ...}]}
"""

from pydantic import BaseModel, ConfigDict, Field

from hitl_cli.models.tool import ToolType

REGISTRY_SCHEMA_VERSION = "1.0.0"


class InstalledTool(BaseModel):
    """A tool recorded as installed on this machine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    version: str
    type: ToolType
    installed_path: str = Field(alias="installedPath")
    installed_at: str = Field(alias="installedAt")


class Registry(BaseModel):
    """Persisted root of the installation registry.

    Installations are kept in insertion order and treated as a set keyed by id.
    All mutators return a new Registry.
    """

    model_config = ConfigDict(frozen=True)

    version: str = REGISTRY_SCHEMA_VERSION
    installations: tuple[InstalledTool, ...] = ()

    def get(self, tool_id: str) -> InstalledTool | None:
        for installed in self.installations:
            if installed.id == tool_id:
                return installed
        return None

    def with_installation(self, tool: InstalledTool) -> "Registry":
        """Return registry with tool upserted; an existing entry for the id moves to the end."""
        remaining = tuple(entry for entry in self.installations if entry.id != tool.id)
        return self.model_copy(update={"installations": (*remaining, tool)})

    def without_installation(self, tool_id: str) -> "Registry":
        remaining = tuple(entry for entry in self.installations if entry.id != tool_id)
        return self.model_copy(update={"installations": remaining})
