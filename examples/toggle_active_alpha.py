"""Toggle the opacity of the focused view on SIGUSR1.

Run it, then trigger a toggle with:
    kill -USR1 $(pgrep -f toggle_active_alpha.py)
"""

from __future__ import annotations

import asyncio
import signal

from wayfire_client import WayfireClient, WayfireError


async def toggle(client: WayfireClient, defaults: dict[int, float]) -> None:
    view = await client.get_focused_view()
    alpha = (await client.get_view_alpha(view.id)).alpha
    default_alpha = defaults.setdefault(view.id, alpha)
    new_alpha = 1.0 if default_alpha == alpha else default_alpha
    await client.set_view_alpha(view.id, new_alpha)


async def main() -> None:
    defaults: dict[int, float] = {}
    triggered = asyncio.Event()
    asyncio.get_running_loop().add_signal_handler(signal.SIGUSR1, triggered.set)

    async with await WayfireClient.connect() as client:
        while True:
            await triggered.wait()
            triggered.clear()
            try:
                await toggle(client, defaults)
            except WayfireError as exc:
                print(f"Failed to toggle alpha: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
