#!/usr/bin/env python3
"""
Basic usage examples for the Bionic Reading client.

Reads the API key and log level from BIONIC_READING_* variables (or a .env file).
"""

import asyncio

from bionic_reading import Client, ConversionError, Fixation, Saccade

TEXT = (
    "Lorem ipsum dolor sit amet, consetetur sadipscing elitr, sed diam nonumy "
    "eirmod tempor invidunt ut labore et dolore magna aliquyam erat, sed diam "
    "voluptua."
)


async def default_conversion(client: Client):
    """Convert with the default Fixation and Saccade."""
    print("=== Default Conversion ===")

    result = await client.convert(TEXT).send()
    print(result.html_text())


async def configured_conversion(client: Client):
    """Convert with stronger highlights and Markdown output."""
    print("\n=== Configured Conversion ===")

    result = await (
        client.convert(TEXT)
        .with_fixation(Fixation.STRONG)
        .with_saccade(Saccade.FEWEST)
        .send()
    )
    print(result.markdown())


async def main():
    client = Client.from_settings()

    try:
        await default_conversion(client)
        await configured_conversion(client)
    except ConversionError as e:
        print(e.render())


if __name__ == "__main__":
    asyncio.run(main())
