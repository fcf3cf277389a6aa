"""Entry point for the cloud agent images command line."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

import yaml

from cloud_agents import __version__
from cloud_agents.config import CloudAgentsConfig, LogLevel


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the command line."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cloud-agents",
        description="Manage Google Compute build agent images",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--resource-url",
        default=None,
        help="Plugin resource endpoint serving catalog documents",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    catalog = commands.add_parser("catalog", help="Fetch provider choice lists")
    catalog.add_argument("--access-key", required=True, help="Provider access key")

    images = commands.add_parser("images", help="Work with persisted image definitions")
    image_commands = images.add_subparsers(dest="images_command", required=True)

    encode = image_commands.add_parser(
        "encode", help="Validate definitions from a YAML/JSON file and print the images field"
    )
    encode.add_argument("file", help="File with a list of image definitions, '-' for stdin")

    decode = image_commands.add_parser("decode", help="Print the definitions in an images field")
    decode.add_argument("text", help="Images field text, '-' for stdin")

    return parser.parse_args(argv)


def _read(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


async def _show_catalog(config: CloudAgentsConfig, access_key: str) -> int:
    from cloud_agents.domains.catalog.client import CatalogClient

    async with CatalogClient(config.resource_url) as client:
        await asyncio.gather(
            client.refresh_resources(access_key),
            client.refresh_agent_pools(),
        )
        if client.error:
            print(client.error, file=sys.stderr)
            return 1

        sections = {
            "zones": client.catalog.zones,
            "networks": client.catalog.networks,
            "machineTypes": client.catalog.machine_types,
            "images": client.catalog.source_images,
            "agentPools": client.agent_pools,
        }
        document = {
            name: [item.model_dump() for item in items] for name, items in sections.items()
        }
        print(yaml.safe_dump(document, sort_keys=False), end="")
    return 0


def _encode_images(source: str) -> int:
    from pydantic import ValidationError as PydanticValidationError

    from cloud_agents.domains.images import codec
    from cloud_agents.domains.images.models import ImageCollection, ImageDefinition
    from cloud_agents.domains.images.validation import validate_image

    data: Any = yaml.safe_load(_read(source)) or []
    if not isinstance(data, list):
        print("Expected a list of image definitions", file=sys.stderr)
        return 1

    collection = ImageCollection()
    failed = False
    for index, item in enumerate(data):
        try:
            image = ImageDefinition.model_validate(item)
        except PydanticValidationError as e:
            failed = True
            print(f"image {index}: {e}", file=sys.stderr)
            continue
        messages = validate_image(image, collection)
        if messages:
            failed = True
            for field, field_messages in messages.items():
                for message in field_messages:
                    print(f"image {index}: {field}: {message}", file=sys.stderr)
            continue
        collection.append(image)

    if failed:
        return 1

    print(codec.encode(collection))
    return 0


def _decode_images(source: str) -> int:
    from cloud_agents.domains.images import codec
    from cloud_agents.utils.errors import ImageDataError

    try:
        text = sys.stdin.read() if source == "-" else source
        collection = codec.decode(text)
    except ImageDataError as e:
        print(str(e), file=sys.stderr)
        return 1

    document = [image.to_storage() for image in collection]
    print(yaml.safe_dump(document, sort_keys=False), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Build config from args, falling back to environment/defaults
    config_kwargs: dict[str, Any] = {}
    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)
    if args.resource_url:
        config_kwargs["resource_url"] = args.resource_url

    config = CloudAgentsConfig(**config_kwargs)
    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.debug(f"cloud-agents v{__version__}")

    if args.command == "catalog":
        return asyncio.run(_show_catalog(config, args.access_key))
    if args.images_command == "encode":
        return _encode_images(args.file)
    return _decode_images(args.text)


if __name__ == "__main__":
    sys.exit(main())
