"""Print the current cursor position."""

from __future__ import annotations

import asyncio

from wayfire_client import WayfireClient, WayfireError


async def main() -> None:
    async with await WayfireClient.connect() as client:
        try:
            x, y = await client.get_cursor_position()
        except WayfireError as exc:
            print(f"Failed to get cursor position: {exc}")
            return
        print(f"Cursor position: {x}, {y}")


if __name__ == "__main__":
    asyncio.run(main())
