# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
Set up HCP audit log streaming.

For every customer this creates a CloudWatch log group and a cross-account
IAM role, then writes a Terraform file (main_<customer>.tf) the customer can
use to import these resources.

Usage:
    hcp-stream [--customers-dir <dir>] [--output-dir <dir>] [-v... | --verbose...]
    hcp-stream -h | --help
    hcp-stream --version

Options:
    -h, --help              Show this help message.
    --version               Show the version.
    --customers-dir <dir>   Folder with .yml files that list the customers
                            to set up. Uses the built-in list when omitted.
    --output-dir <dir>      Folder to write the Terraform files to, overrides
                            HCP_OUTPUT_DIR. Defaults to the current directory.
    -v, --verbose           Show verbose logging information.

Environment:
    UNOSECUR_AWS_REGION       Region to create the resources in (required).
    UNOSECUR_ACCOUNT_KEY      Access key id of the provisioning account.
    UNOSECUR_ACCOUNT_SECRET   Secret access key of the provisioning account.
"""

import dataclasses
import logging
import sys

from docopt import docopt

from . import __version__
from .config import Config, create_clients, get_partition, load_environment
from .customer import DEFAULT_CUSTOMERS, read_config_files
from .errors import InvalidRoleArnError, ServiceError
from .logger import configure_logger, set_log_level
from .provisioner import setup_customer_hcp_stream
from .terraform import write_main_tf

LOGGER = configure_logger(__name__)


def process_customers(clients, config, customers):
    """
    Provisions every customer in order and writes their Terraform file.
    A failing customer is logged and skipped, the others are still processed.

    :return: A list of (customer name, succeeded) tuples.
    """
    summary = []
    for customer in customers:
        try:
            result = setup_customer_hcp_stream(clients, config, customer)
            write_main_tf(result, config.output_dir)
            summary.append((customer.name, True))
        except (ServiceError, InvalidRoleArnError, OSError) as error:
            LOGGER.error(
                "❌ Error processing %s: %s",
                customer.name,
                error,
            )
            summary.append((customer.name, False))
    return summary


def main(argv=None):
    """Main function to set up the HCP audit log streams """
    options = docopt(__doc__, argv=argv, version=__version__)

    if options["--verbose"] > 0:
        set_log_level(logging.DEBUG)
    if options["--verbose"] > 1:
        # Also enable DEBUG mode for other libraries, like boto3
        logging.basicConfig(level=logging.DEBUG)

    LOGGER.debug("Input arguments: %s", options)

    load_environment()
    config = Config.from_environ()
    if options["--output-dir"]:
        config = dataclasses.replace(
            config,
            output_dir=options["--output-dir"],
        )
    get_partition(config.region)

    if options["--customers-dir"]:
        customers = read_config_files(options["--customers-dir"])
    else:
        customers = DEFAULT_CUSTOMERS

    clients = create_clients(config)
    summary = process_customers(clients, config, customers)

    failed = [name for name, succeeded in summary if not succeeded]
    if failed:
        LOGGER.error(
            "Failed to set up %d of %d customer(s): %s",
            len(failed),
            len(summary),
            ", ".join(failed),
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
