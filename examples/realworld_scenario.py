"""Tour of the Wayfire client API against a running compositor."""

from __future__ import annotations

import asyncio
import json
import os
from typing import Any

from pydantic import BaseModel

from wayfire_client import WayfireClient, WayfireError


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def print_json(label: str, data: Any) -> None:
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    elif isinstance(data, list):
        data = [item.model_dump(by_alias=True) if isinstance(item, BaseModel) else item for item in data]
    print(f"{label} JSON: {json.dumps(data, indent=2)}")


async def attempt(label: str, call: Any) -> Any:
    try:
        result = await call
    except WayfireError as exc:
        print(f"→ {label} failed: {exc}")
        return None
    print_json(label, result)
    return result


async def main() -> None:
    log_level = os.getenv("WAYFIRE_CLIENT_LOG", "info")
    async with await WayfireClient.connect(log_level=log_level) as client:
        log_section("Step 1: Inventory")
        views = [view for view in await client.list_views() if view.role == "toplevel"]
        print_json("list_views", views)
        print_json("list_outputs", await client.list_outputs())
        print_json("list_wsets", await client.list_wsets())
        print_json("list_input_devices", await client.list_input_devices())

        log_section("Step 2: Configuration")
        await attempt("get_configuration", client.get_configuration())
        await attempt("get_option_value", client.get_option_value("core/plugins"))
        position = await attempt("get_cursor_position", client.get_cursor_position())
        if position is not None:
            print(f"→ Cursor position: x={position[0]}, y={position[1]}")
        await attempt("get_output", client.get_output(1))

        log_section("Step 3: Plugin toggles")
        focused = await client.get_focused_view()
        output = await client.get_focused_output()
        await attempt("set_workspace", client.set_workspace(1, 1, focused.id, output.id))
        for _ in range(2):
            await attempt("expo_toggle", client.expo_toggle())
        for _ in range(2):
            await attempt("scale_toggle", client.scale_toggle())
        await attempt("cube_activate", client.cube_activate())
        await attempt("cube_rotate_left", client.cube_rotate_left())
        await attempt("cube_rotate_right", client.cube_rotate_right())
        await attempt("toggle_showdesktop", client.toggle_showdesktop())

        log_section("Step 4: Events")
        focused = await client.get_focused_view()
        await attempt("watch", client.watch(["view-geometry-changed"]))
        await attempt("configure_view", client.configure_view(focused.id, 100, 100, 800, 600, output_id=1))
        # The geometry change is usually queued while configure_view waited.
        print(f"→ {client.pending_events} event(s) pending")
        await attempt("read_next_event", client.read_next_event())

        log_section("Step 5: View state")
        await attempt("assign_slot", client.assign_slot(focused.id, "top-left"))
        await attempt("set_focus", client.set_focus(focused.id))
        await attempt("set_view_sticky", client.set_view_sticky(focused.id, True))
        await attempt("send_view_to_back", client.send_view_to_back(focused.id, True))
        await attempt("set_view_minimized", client.set_view_minimized(focused.id, True))
        await attempt("set_view_minimized", client.set_view_minimized(focused.id, False))
        if views:
            await attempt("get_view_alpha", client.get_view_alpha(views[0].id))
        else:
            print("→ No views found.")


if __name__ == "__main__":
    asyncio.run(main())
