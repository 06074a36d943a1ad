"""
Lightweight MCP tool runner for naver-maps-mcp.

Runs tools through the dispatch table without MCP transport; useful for
testing credentials and for demos. Reads NAVER_CLIENT_ID and
NAVER_CLIENT_SECRET from the environment (or a .env file).
"""

from __future__ import annotations

import asyncio
import json
import sys

from naver_maps_mcp.config import Settings, load_env_file
from naver_maps_mcp.core.naver import NaverMapsClient
from naver_maps_mcp.core.router import RouteOrchestrator
from naver_maps_mcp.tools.directions import register_directions_tools
from naver_maps_mcp.tools.dispatcher import ToolDispatcher
from naver_maps_mcp.tools.geocoding import register_geocoding_tools


class ToolRunner:
    """Run Naver Maps MCP tools directly without transport."""

    def __init__(self, settings: Settings):
        self.client = NaverMapsClient(settings)
        self._dispatcher = ToolDispatcher()
        register_geocoding_tools(self._dispatcher, self.client)
        register_directions_tools(self._dispatcher, RouteOrchestrator(self.client))

    @property
    def tool_names(self) -> list[str]:
        return self._dispatcher.tool_names

    async def run(self, tool_name: str, **kwargs) -> dict:
        """Run a tool and return parsed JSON result."""
        raw = await self._dispatcher.dispatch(tool_name, kwargs)
        return json.loads(raw)

    async def run_text(self, tool_name: str, **kwargs) -> str:
        """Run a tool and return text output."""
        return await self._dispatcher.dispatch(
            tool_name, {**kwargs, "output_mode": "text"}, output_mode="text"
        )

    async def close(self) -> None:
        await self.client.aclose()


async def main():
    """Demo: geocode, reverse geocode, and route between two landmarks."""
    load_env_file()
    settings = Settings.from_env()
    if not settings.has_credentials:
        print(f"Set {', '.join(settings.missing_credentials)} to run the demo", file=sys.stderr)
        return

    runner = ToolRunner(settings)
    print(f"Available tools ({len(runner.tool_names)}): {runner.tool_names}\n")

    try:
        print("=" * 60)
        print("1. geocode")
        print("=" * 60)
        result = await runner.run("geocode", address="경기도 성남시 분당구 불정로 6")
        for a in result.get("addresses", []):
            print(f"  {a['road_address'] or a['jibun_address']}")
            print(f"    x={a['x']}, y={a['y']}")
        print()

        print("=" * 60)
        print("2. reverseGeocode")
        print("=" * 60)
        print(await runner.run_text("reverseGeocode", latitude=37.5014274, longitude=127.0269218))
        print()

        print("=" * 60)
        print("3. getDirectionsByNaturalLanguage")
        print("=" * 60)
        print(
            await runner.run_text(
                "getDirectionsByNaturalLanguage",
                startAddress="서울역",
                goalAddress="강남역",
            )
        )
        print()

        print("=" * 60)
        print("4. unknown tool")
        print("=" * 60)
        print(await runner.run("doesNotExist"))
    finally:
        await runner.close()


if __name__ == "__main__":
    asyncio.run(main())
