from typing import Any

import pytest

from wayfire_client import (
    CommandError,
    Layout,
    MissingFieldError,
    ParseError,
    Request,
    View,
    WayfireClient,
    WayfireError,
)

from fakes import FakeCompositor


class DummyTransport:
    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.requests: list[Request] = []
        self.events: list[Any] = []
        self.closed = False

    @property
    def pending_events(self) -> int:
        return len(self.events)

    async def send(self, request: Request) -> Any:
        self.requests.append(request)
        return self.responses.pop(0)

    async def read_next_event(self) -> Any:
        return self.events.pop(0)

    async def close(self) -> None:
        self.closed = True


async def test_focused_view_scenario_over_framed_stream() -> None:
    fake = FakeCompositor()
    fake.push(
        {"event": "view-mapped", "view": {"id": 7}},
        {"info": {"id": 42, "role": "toplevel", "app-id": "foot", "output-id": 1}},
    )
    client = WayfireClient(fake.transport())

    view = await client.get_focused_view()

    assert isinstance(view, View)
    assert view.id == 42
    assert view.app_id == "foot"
    assert view.output_id == 1
    assert client.pending_events == 1
    assert (await client.read_next_event())["event"] == "view-mapped"
    assert fake.sent() == [{"method": "window-rules/get-focused-view", "data": None}]


async def test_missing_info_raises_missing_field_error() -> None:
    client = WayfireClient(DummyTransport({"result": "ok"}))
    with pytest.raises(MissingFieldError) as exc_info:
        await client.get_focused_view()
    assert exc_info.value.field == "info"
    assert exc_info.value.context == {"result": "ok"}


async def test_error_document_surfaces_as_missing_field() -> None:
    client = WayfireClient(DummyTransport({"error": "no such view"}))
    with pytest.raises(MissingFieldError):
        await client.get_view(5)


async def test_invalid_shape_raises_parse_error() -> None:
    client = WayfireClient(DummyTransport({"alpha": "opaque"}))
    with pytest.raises(ParseError):
        await client.get_view_alpha(3)


async def test_cursor_position_uses_underscore_method() -> None:
    transport = DummyTransport({"pos": {"x": 10.5, "y": 20}})
    client = WayfireClient(transport)
    assert await client.get_cursor_position() == (10.5, 20.0)
    assert transport.requests[0].method == "window-rules/get_cursor_position"


async def test_cursor_position_requires_pos() -> None:
    client = WayfireClient(DummyTransport({}))
    with pytest.raises(MissingFieldError):
        await client.get_cursor_position()


async def test_list_views_decodes_array() -> None:
    transport = DummyTransport([{"id": 1, "role": "toplevel", "unknown-key": 3}, {"id": 2, "role": "desktop-environment"}])
    client = WayfireClient(transport)
    views = await client.list_views()
    assert [view.id for view in views] == [1, 2]
    assert views[0].role == "toplevel"


@pytest.mark.parametrize(
    ("call", "method", "data"),
    [
        (lambda c: c.expo_toggle(), "expo/toggle", None),
        (lambda c: c.scale_toggle_all(), "expo/toggle_all", None),
        (lambda c: c.toggle_showdesktop(), "wm-actions/toggle_showdesktop", None),
        (lambda c: c.cube_rotate_right(), "cube/rotate_right", None),
        (lambda c: c.set_view_sticky(4, True), "wm-actions/set-sticky", {"view_id": 4, "state": True}),
        (lambda c: c.send_view_to_back(4, False), "wm-actions/send-to-back", {"view_id": 4, "state": False}),
        (lambda c: c.set_view_alpha(4, 0.5), "wf/alpha/set-view-alpha", {"view-id": 4, "alpha": 0.5}),
        (lambda c: c.set_focus(4), "window-rules/focus-view", {"id": 4}),
        (lambda c: c.assign_slot(4, "top-left"), "grid/top-left", {"view_id": 4}),
        (
            lambda c: c.set_workspace(1, 2, 4, 3),
            "vswitch/set-workspace",
            {"x": 1, "y": 2, "output-id": 3, "view-id": 4},
        ),
        (lambda c: c.configure_input_device(9, False), "input/configure-device", {"id": 9, "enabled": False}),
        (lambda c: c.create_headless_output(800, 600), "wayfire/create-headless-output", {"width": 800, "height": 600}),
    ],
)
async def test_requests_use_protocol_method_names(call, method: str, data: Any) -> None:
    transport = DummyTransport({"result": "ok"})
    client = WayfireClient(transport)
    assert await call(client) == {"result": "ok"}
    assert transport.requests == [Request(method, data)]


async def test_configure_view_includes_output_only_when_given() -> None:
    transport = DummyTransport({"result": "ok"}, {"result": "ok"})
    client = WayfireClient(transport)
    await client.configure_view(7, 100, 100, 800, 600)
    await client.configure_view(7, 100, 100, 800, 600, output_id=1)
    geometry = {"x": 100, "y": 100, "width": 800, "height": 600}
    assert transport.requests[0].data == {"id": 7, "geometry": geometry}
    assert transport.requests[1].data == {"id": 7, "geometry": geometry, "output_id": 1}


async def test_watch_with_and_without_filter() -> None:
    transport = DummyTransport({"result": "ok"}, {"result": "ok"})
    client = WayfireClient(transport)
    await client.watch()
    await client.watch(["view-geometry-changed"])
    assert transport.requests[0] == Request("window-rules/events/watch", {})
    assert transport.requests[1].data == {"events": ["view-geometry-changed"]}


async def test_destroy_headless_output_requires_target() -> None:
    transport = DummyTransport({"result": "ok"})
    client = WayfireClient(transport)
    with pytest.raises(CommandError):
        await client.destroy_headless_output()
    assert transport.requests == []
    await client.destroy_headless_output(output_id=3)
    assert transport.requests[0].data == {"output-id": 3}


async def test_tiling_layout_round_trip() -> None:
    layout_doc = {"vertical-split": [{"view-id": 1, "weight": 1.0}, {"view-id": 2, "weight": 2.0}]}
    transport = DummyTransport({"layout": layout_doc}, {"result": "ok"})
    client = WayfireClient(transport)

    layout = await client.get_tiling_layout(0, 1, 1)
    assert isinstance(layout, Layout)
    assert [child.view_id for child in layout.vertical_split or []] == [1, 2]
    assert transport.requests[0].data == {"wset-index": 0, "workspace": {"x": 1, "y": 1}}

    await client.set_tiling_layout(0, 1, 1, layout)
    assert transport.requests[1].data["layout"] == layout_doc


async def test_request_safe_wraps_exceptions() -> None:
    fake = FakeCompositor()
    fake.hang_up()
    client = WayfireClient(fake.transport())
    result = await client.request_safe("expo/toggle")
    assert result.ok is False
    assert result.error is not None


async def test_connect_uses_injected_transport() -> None:
    transport = DummyTransport()
    async with await WayfireClient.connect(transport=transport) as client:
        assert client.transport is transport
    assert transport.closed


def test_layout_document_keeps_null_and_unknown_keys() -> None:
    document = {"vertical-split": [{"view-id": 1, "custom": None}, {"view-id": 2, "geometry": {"x": 5}}]}
    assert Layout.model_validate(document).to_document() == document
    assert Layout(view_id=3).to_document() == {"view-id": 3}


async def test_focused_output_id_feeds_set_workspace() -> None:
    transport = DummyTransport({"info": {"id": 2, "name": "HEADLESS-1"}}, {"result": "ok"})
    client = WayfireClient(transport)
    output = await client.get_focused_output()
    await client.set_workspace(1, 1, 7, output.id)
    assert transport.requests[0].method == "window-rules/get-focused-output"
    assert transport.requests[1].data == {"x": 1, "y": 1, "output-id": 2, "view-id": 7}


@pytest.mark.parametrize(
    ("call", "response"),
    [
        (lambda c: c.get_view(5), {"error": "no such view"}),
        (lambda c: c.get_view_alpha(5), {"alpha": "opaque"}),
    ],
)
async def test_client_failures_share_the_base_error(call, response: Any) -> None:
    client = WayfireClient(DummyTransport(response))
    with pytest.raises(WayfireError):
        await call(client)
