# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
Model for the customers that should receive an HCP audit log stream, and the
parser for the yaml files that list them.
"""

import os
from dataclasses import dataclass

import yaml

from .errors import ConfigError
from .logger import configure_logger

LOGGER = configure_logger(__name__)

CONFIG_FILE_EXTENSIONS = (".yml", ".yaml")


@dataclass(frozen=True)
class CustomerRequest:
    name: str
    external_account_id: str
    external_id: str

    @classmethod
    def load_from_config(cls, config, source="<inline>"):
        """Initialize CustomerRequest class from configuration object"""
        missing = [
            key
            for key in ("name", "hcp_aws_id", "hcp_external_id")
            if not config.get(key)
        ]
        if missing:
            raise ConfigError(
                f"Customer definition in {source} is missing: "
                f"{', '.join(missing)}"
            )
        # yaml reads unquoted ids as numbers, 012345670123 even as octal.
        not_strings = [
            key
            for key in ("hcp_aws_id", "hcp_external_id")
            if not isinstance(config[key], str)
        ]
        if not_strings:
            raise ConfigError(
                f"Customer definition in {source} should quote: "
                f"{', '.join(not_strings)}"
            )
        return cls(
            name=str(config["name"]),
            external_account_id=config["hcp_aws_id"],
            external_id=config["hcp_external_id"],
        )


DEFAULT_CUSTOMERS = [
    CustomerRequest(
        name="unosecur",
        external_account_id="711430482607",
        external_id="bc32915c9df94069a0d00e415eb9a7f4",
    ),
]


def read_config_files(folder):
    files = sorted(
        os.path.join(folder, f)
        for f in os.listdir(folder)
    )
    customers = []
    for filename in files:
        if not filename.endswith(CONFIG_FILE_EXTENSIONS):
            # Skipping files that are not yaml
            continue
        customers.extend(_read_config_file(filename))

    LOGGER.info(
        "Found %d customer(s) in configuration file(s).",
        len(customers),
    )
    return customers


def _read_config_file(filename):
    try:
        with open(filename, mode='r', encoding='utf-8') as stream:
            config = yaml.safe_load(stream)
        if not isinstance(config, dict):
            raise ConfigError(f"{filename} does not contain a mapping")
        return [
            CustomerRequest.load_from_config(customer, filename)
            for customer in config.get('customers', [])
        ]
    except Exception as error:
        LOGGER.error(
            "Could not process %s due to an error: %s",
            filename,
            error,
        )
        LOGGER.error(
            "Make sure the content of YAML files (.yml) are not empty and "
            "contain a valid YAML data structure.",
        )
        raise
