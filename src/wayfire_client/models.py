"""Typed views of the documents the compositor sends back.

Unknown keys are kept, so newer compositor builds keep decoding.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Geometry(WireModel):
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Workspace(WireModel):
    x: int = 0
    y: int = 0
    grid_width: int | None = None
    grid_height: int | None = None


class View(WireModel):
    id: int
    pid: int | None = None
    title: str = ""
    app_id: str = Field(default="", alias="app-id")
    role: str = ""
    type: str | None = None
    layer: str | None = None
    mapped: bool = False
    focusable: bool | None = None
    geometry: Geometry | None = None
    base_geometry: Geometry | None = Field(default=None, alias="base-geometry")
    bbox: Geometry | None = None
    output_id: int = Field(default=-1, alias="output-id")
    output_name: str | None = Field(default=None, alias="output-name")
    wset_index: int | None = Field(default=None, alias="wset-index")
    parent: int | None = None
    tiled_edges: int | None = Field(default=None, alias="tiled-edges")
    fullscreen: bool = False
    minimized: bool = False
    activated: bool = False
    sticky: bool = False
    last_focus_timestamp: int | None = Field(default=None, alias="last-focus-timestamp")


class Output(WireModel):
    id: int
    name: str = ""
    geometry: Geometry | None = None
    workarea: Geometry | None = None
    wset_index: int | None = Field(default=None, alias="wset-index")
    workspace: Workspace | None = None


class WorkspaceSet(WireModel):
    index: int
    name: str = ""
    output_id: int | None = Field(default=None, alias="output-id")
    output_name: str | None = Field(default=None, alias="output-name")
    workspace: Workspace | None = None


class InputDevice(WireModel):
    id: int
    name: str = ""
    vendor: int | None = None
    product: int | None = None
    type: str | None = None
    enabled: bool = True


class WayfireConfiguration(WireModel):
    api_version: int | None = Field(default=None, alias="api-version")
    build_commit: str | None = Field(default=None, alias="build-commit")
    build_branch: str | None = Field(default=None, alias="build-branch")
    plugin_path: str | None = Field(default=None, alias="plugin-path")
    plugin_xml_dir: str | None = Field(default=None, alias="plugin-xml-dir")
    xwayland_support: bool | None = Field(default=None, alias="xwayland-support")


class OptionValueResponse(WireModel):
    result: str | None = None
    value: Any = None
    default: Any = None


class ViewAlpha(WireModel):
    alpha: float


class Layout(WireModel):
    """One node of a simple-tile layout tree.

    Leaves carry ``view-id``; split nodes carry their children under
    ``vertical-split`` or ``horizontal-split``.
    """

    view_id: int | None = Field(default=None, alias="view-id")
    geometry: Geometry | None = None
    weight: float | None = None
    vertical_split: list[Layout] | None = Field(default=None, alias="vertical-split")
    horizontal_split: list[Layout] | None = Field(default=None, alias="horizontal-split")

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


__all__ = [
    "Geometry",
    "InputDevice",
    "Layout",
    "OptionValueResponse",
    "Output",
    "View",
    "ViewAlpha",
    "WayfireConfiguration",
    "Workspace",
    "WorkspaceSet",
]
