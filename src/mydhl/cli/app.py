"""
CLI Application - Create a DHL Express shipment from a JSON description.

Usage:
    # Preview the request (default, nothing is sent)
    mydhl --shipment shipment.json

    # Submit to the sandbox and save the label
    mydhl --shipment shipment.json --execute --label-output label.pdf

    # Submit to production
    mydhl --shipment shipment.json --execute --production

Environment Variables Required:
    MYDHL_USERNAME: API key issued by DHL
    MYDHL_PASSWORD: API secret issued by DHL
"""

import argparse
import logging
import sys
from typing import Optional

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.dhl import MyDHLApiClient
from ..adapters.parsers import ShipmentFileLoader, ShipmentResponseParser
from ..application.services import ShipmentService
from ..core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    MissingArgumentError,
    MyDHLError,
    ShipmentFileError,
)
from ..core.ports.carrier_api import CarrierApiError
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mydhl",
        description="Create DHL Express shipments through the MyDHL API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--shipment", "-s",
        type=str,
        required=True,
        help="Path to the JSON shipment description"
    )

    parser.add_argument(
        "--execute",
        action="store_true",
        help="Actually submit the shipment (default is dry-run)"
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--test-mode",
        dest="test_mode",
        action="store_true",
        default=None,
        help="Use the MyDHL sandbox (or set MYDHL_TEST_MODE)"
    )
    mode.add_argument(
        "--production",
        dest="test_mode",
        action="store_false",
        help="Use the production endpoint"
    )

    parser.add_argument(
        "--base-url",
        type=str,
        help="Override the API base URL (or set MYDHL_BASE_URL)"
    )

    parser.add_argument(
        "--label-output", "-o",
        type=str,
        help="Write the decoded label to this file after a successful submission"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    console = Console(color=not args.no_color)

    provider = EnvironmentConfigProvider(cli_overrides=vars(args))
    try:
        config = provider.load()
    except ConfigurationError as e:
        console.error(str(e))
        return ExitCode.CONFIG_ERROR

    setup_logging(config.verbose)
    logger = logging.getLogger("main")

    if config.execute:
        errors = provider.validate()
        if errors:
            for error in errors:
                console.error(error)
            return ExitCode.CONFIG_ERROR

    client = MyDHLApiClient.from_config(config.api)
    service = ShipmentService(client, ShipmentResponseParser())

    try:
        ShipmentFileLoader().load_into(config.shipment_path, service)
        payload = service.build_request()
    except ShipmentFileError as e:
        console.error(str(e))
        return ExitCode.CONFIG_ERROR
    except (InvalidArgumentError, MissingArgumentError) as e:
        console.error(str(e))
        return ExitCode.VALIDATION_ERROR

    if config.dry_run:
        console.dry_run_banner()
        console.request_preview(payload)
        console.print()
        console.info("Use --execute to submit this shipment")
        return ExitCode.SUCCESS

    target = "sandbox" if config.api.test_mode else "production"
    logger.info(f"Submitting shipment to MyDHL {target} ({client.base_url})")

    try:
        shipment = service.send_shipment()
    except CarrierApiError as e:
        console.error(str(e))
        return ExitCode.API_ERROR
    except MyDHLError as e:
        console.error(str(e))
        return ExitCode.ERROR

    console.shipment_result(shipment)

    if config.label_output:
        if not shipment.label_pdf:
            console.warning("Response carried no label; nothing written")
        else:
            try:
                config.label_output.write_bytes(shipment.label_bytes())
            except (OSError, MyDHLError) as e:
                console.error(f"Could not write label: {e}")
                return ExitCode.ERROR
            console.success(f"Label written to {config.label_output}")

    return ExitCode.SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
