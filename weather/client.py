import asyncio
import sys
from contextlib import AsyncExitStack
from typing import Dict, Optional, Sequence

from mcp import ClientSession, StdioServerParameters, stdio_client

from .models import WeatherTools

USAGE = """Commands:
  alerts <STATE>         e.g. alerts CA
  forecast <LAT> <LON>   e.g. forecast 37.7749 -122.4194
  quit"""


def parse_command(line: str) -> Optional[tuple[str, Dict]]:
    """Turn a typed command into a (tool name, arguments) pair, None if it is not one."""
    parts = line.split()
    if not parts:
        return None
    command, args = parts[0].lower(), parts[1:]
    if command == "alerts" and len(args) == 1:
        return WeatherTools.GET_ALERTS.value, {"state": args[0]}
    if command == "forecast" and len(args) == 2:
        try:
            return WeatherTools.GET_FORECAST.value, {
                "latitude": float(args[0]),
                "longitude": float(args[1]),
            }
        except ValueError:
            return None
    return None


class MCPClient:
    def __init__(self):
        # managing the connection of the client
        self.session: Optional[ClientSession] = None
        # ensures resources are properly closed when not needed in async context
        self.exit_stack = AsyncExitStack()

    async def connect_to_server(self, server_args: Sequence[str] = ()):
        """Launch the weather server with the current interpreter and connect to it over stdio

        Args:
            server_args: extra command line options for the server, e.g. ["--timeout", "10"]
        """
        server_params = StdioServerParameters(
            command=sys.executable,
            args=["-m", "weather", *server_args],
        )
        # stdio client launches the server then returns a (reader, writer) pair
        self.stdio, self.write = await self.exit_stack.enter_async_context(stdio_client(server_params))
        self.session = await self.exit_stack.enter_async_context(ClientSession(self.stdio, self.write))

        await self.session.initialize()

        response = await self.session.list_tools()
        print("\nConnected to server with tools:", [tool.name for tool in response.tools])

    async def call_function(self, tool_name: str, tool_args: Dict) -> str:
        """Calls a tool and returns the text of its result."""
        result = await self.session.call_tool(tool_name, tool_args)
        text = "\n".join(block.text for block in result.content if block.type == "text")
        if result.isError:
            return f"Error: {text}"
        return text

    async def chat_loop(self):
        """Run an interactive command loop"""
        print("\nWeather client started!")
        print(USAGE)

        while True:
            query = input("\nQuery: ").strip()
            if query.lower() == "quit":
                break

            call = parse_command(query)
            if call is None:
                print(USAGE)
                continue

            try:
                print("\n" + await self.call_function(*call))
            except Exception as e:
                print(f"\nError: {str(e)}")

    async def cleanup(self):
        """Clean up resources"""
        await self.exit_stack.aclose()


async def run(server_args: Sequence[str] = ()):
    client = MCPClient()
    try:
        await client.connect_to_server(server_args)
        await client.chat_loop()
    finally:
        await client.cleanup()


def main():
    # anything after the program name is handed to the server, e.g. --base-url
    asyncio.run(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
