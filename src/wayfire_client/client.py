"""High-level client exposing the Wayfire IPC methods."""

from __future__ import annotations

from typing import Any

from .config import ClientOptions
from .errors import CommandError
from .logger import LogLevel, create_logger
from .models import (
    InputDevice,
    Layout,
    OptionValueResponse,
    Output,
    View,
    ViewAlpha,
    WayfireConfiguration,
    WorkspaceSet,
)
from .parser import decode_as, extract_field
from .transport import SocketTransport, Transport
from .types import Document, ExecuteResult, Request, Response


class WayfireClient:
    """Primary entry point for talking to a running Wayfire compositor.

    All calls share one transport and must not be issued concurrently.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        self._transport = transport
        self._logger = create_logger(logger=logger, level=log_level).child("client")

    @classmethod
    async def connect(
        cls,
        socket_path: str | None = None,
        *,
        transport: Transport | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> "WayfireClient":
        options = ClientOptions(
            socket_path=socket_path,
            transport=transport,
            logger=logger,
            log_level=log_level,
        )
        bound = create_logger(logger=options.logger, level=options.log_level)
        if options.transport is None:
            options.transport = await SocketTransport.connect(options.socket_path, logger=bound)
        return cls(options.transport, logger=bound, log_level=options.log_level)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def pending_events(self) -> int:
        return self._transport.pending_events

    async def request(self, method: str, data: Document | None = None) -> Response:
        return await self._transport.send(Request(method, data))

    async def request_safe(self, method: str, data: Document | None = None) -> ExecuteResult[Response]:
        try:
            response = await self.request(method, data)
            return ExecuteResult(ok=True, data=response)
        except Exception as exc:  # pragma: no cover - thin wrapper
            return ExecuteResult(ok=False, error=exc)

    async def read_next_event(self) -> Response:
        return await self._transport.read_next_event()

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> "WayfireClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # Listing

    async def list_views(self) -> list[View]:
        return decode_as(list[View], await self.request("window-rules/list-views"))

    async def list_outputs(self) -> list[Output]:
        return decode_as(list[Output], await self.request("window-rules/list-outputs"))

    async def list_wsets(self) -> list[WorkspaceSet]:
        return decode_as(list[WorkspaceSet], await self.request("window-rules/list-wsets"))

    async def list_input_devices(self) -> list[InputDevice]:
        return decode_as(list[InputDevice], await self.request("input/list-devices"))

    # Compositor configuration

    async def get_configuration(self) -> WayfireConfiguration:
        return decode_as(WayfireConfiguration, await self.request("wayfire/configuration"))

    async def get_option_value(self, option: str) -> OptionValueResponse:
        response = await self.request("wayfire/get-config-option", {"option": option})
        return decode_as(OptionValueResponse, response)

    async def create_headless_output(self, width: int, height: int) -> Response:
        return await self.request("wayfire/create-headless-output", {"width": width, "height": height})

    async def destroy_headless_output(
        self,
        output_name: str | None = None,
        output_id: int | None = None,
    ) -> Response:
        if output_name is not None:
            data: Document = {"output": output_name}
        elif output_id is not None:
            data = {"output-id": output_id}
        else:
            raise CommandError("Either output_name or output_id must be provided")
        return await self.request("wayfire/destroy-headless-output", data)

    # Views and outputs

    async def get_output(self, output_id: int) -> Output:
        return decode_as(Output, await self.request("window-rules/output-info", {"id": output_id}))

    async def get_view(self, view_id: int) -> View:
        response = await self.request("window-rules/view-info", {"id": view_id})
        return decode_as(View, extract_field(response, "info"))

    async def get_focused_view(self) -> View:
        response = await self.request("window-rules/get-focused-view")
        return decode_as(View, extract_field(response, "info"))

    async def get_focused_output(self) -> Output:
        response = await self.request("window-rules/get-focused-output")
        return decode_as(Output, extract_field(response, "info"))

    async def get_cursor_position(self) -> tuple[float, float]:
        # Wayfire registers this one with an underscore, unlike its siblings.
        response = await self.request("window-rules/get_cursor_position")
        pos = extract_field(response, "pos")
        if not isinstance(pos, dict):
            pos = {}
        return _as_float(pos.get("x")), _as_float(pos.get("y"))

    async def wset_info(self, wset_id: int) -> Response:
        return await self.request("window-rules/wset-info", {"id": wset_id})

    async def close_view(self, view_id: int) -> Response:
        return await self.request("window-rules/close-view", {"id": view_id})

    async def set_focus(self, view_id: int) -> Response:
        return await self.request("window-rules/focus-view", {"id": view_id})

    async def configure_view(
        self,
        view_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        output_id: int | None = None,
    ) -> Response:
        data: Document = {
            "id": view_id,
            "geometry": {"x": x, "y": y, "width": width, "height": height},
        }
        if output_id is not None:
            data["output_id"] = output_id
        return await self.request("window-rules/configure-view", data)

    async def watch(self, events: list[str] | None = None) -> Response:
        """Subscribe to compositor events; ``None`` subscribes to all of them."""
        data: Document = {}
        if events is not None:
            data["events"] = list(events)
        return await self.request("window-rules/events/watch", data)

    # Plugins

    async def get_view_alpha(self, view_id: int) -> ViewAlpha:
        return decode_as(ViewAlpha, await self.request("wf/alpha/get-view-alpha", {"view-id": view_id}))

    async def set_view_alpha(self, view_id: int, alpha: float) -> Response:
        return await self.request("wf/alpha/set-view-alpha", {"view-id": view_id, "alpha": alpha})

    async def get_tiling_layout(self, wset: int, x: int, y: int) -> Layout:
        data = {"wset-index": wset, "workspace": {"x": x, "y": y}}
        response = await self.request("simple-tile/get-layout", data)
        return decode_as(Layout, extract_field(response, "layout"))

    async def set_tiling_layout(self, wset: int, x: int, y: int, layout: Layout | Document) -> Response:
        if isinstance(layout, Layout):
            layout = layout.to_document()
        data = {"wset-index": wset, "workspace": {"x": x, "y": y}, "layout": layout}
        return await self.request("simple-tile/set-layout", data)

    async def set_view_always_on_top(self, view_id: int, state: bool) -> Response:
        return await self._view_state("wm-actions/set-always-on-top", view_id, state)

    async def set_view_fullscreen(self, view_id: int, state: bool) -> Response:
        return await self._view_state("wm-actions/set-fullscreen", view_id, state)

    async def set_view_sticky(self, view_id: int, state: bool) -> Response:
        return await self._view_state("wm-actions/set-sticky", view_id, state)

    async def send_view_to_back(self, view_id: int, state: bool) -> Response:
        return await self._view_state("wm-actions/send-to-back", view_id, state)

    async def set_view_minimized(self, view_id: int, state: bool) -> Response:
        return await self._view_state("wm-actions/set-minimized", view_id, state)

    async def toggle_showdesktop(self) -> Response:
        return await self.request("wm-actions/toggle_showdesktop")

    async def expo_toggle(self) -> Response:
        return await self.request("expo/toggle")

    async def scale_toggle(self) -> Response:
        return await self.request("scale/toggle")

    async def scale_toggle_all(self) -> Response:
        # Wayfire routes this through the expo namespace.
        return await self.request("expo/toggle_all")

    async def cube_activate(self) -> Response:
        return await self.request("cube/activate")

    async def cube_rotate_left(self) -> Response:
        return await self.request("cube/rotate_left")

    async def cube_rotate_right(self) -> Response:
        return await self.request("cube/rotate_right")

    async def assign_slot(self, view_id: int, slot: str) -> Response:
        return await self.request(f"grid/{slot}", {"view_id": view_id})

    async def set_workspace(self, x: int, y: int, view_id: int, output_id: int) -> Response:
        data = {"x": x, "y": y, "output-id": output_id, "view-id": view_id}
        return await self.request("vswitch/set-workspace", data)

    async def configure_input_device(self, device_id: int, enabled: bool) -> Response:
        return await self.request("input/configure-device", {"id": device_id, "enabled": enabled})

    async def _view_state(self, method: str, view_id: int, state: bool) -> Response:
        self._logger.trace("%s view=%d state=%s", method, view_id, state)
        return await self.request(method, {"view_id": view_id, "state": state})


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


__all__ = ["WayfireClient"]
