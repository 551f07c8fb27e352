# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
Configuration module, reads the environment once at startup and builds the
AWS clients that are shared by every customer that is processed.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import boto3
from boto3.session import Session
from botocore.config import Config as BotoConfig
from botocore.exceptions import UnknownRegionError
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .logger import configure_logger

LOGGER = configure_logger(__name__)

REGION_ENV = "UNOSECUR_AWS_REGION"
ACCESS_KEY_ENV = "UNOSECUR_ACCOUNT_KEY"
SECRET_KEY_ENV = "UNOSECUR_ACCOUNT_SECRET"

DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 60
DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class Config:
    region: str
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    output_dir: str = "."

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None):
        """
        Build the configuration from the environment.

        :param environ: The mapping to read from, defaults to os.environ.
        :raises ConfigError: If the region is not set or a numeric
            setting is not an integer.
        :return: The Config instance.
        """
        if environ is None:
            environ = os.environ

        region = environ.get(REGION_ENV)
        if not region:
            raise ConfigError(f"{REGION_ENV} is not set in the environment")

        return cls(
            region=region,
            access_key_id=environ.get(ACCESS_KEY_ENV) or None,
            secret_access_key=environ.get(SECRET_KEY_ENV) or None,
            connect_timeout=_read_int(
                environ, "HCP_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT,
            ),
            read_timeout=_read_int(
                environ, "HCP_READ_TIMEOUT", DEFAULT_READ_TIMEOUT,
            ),
            max_attempts=_read_int(
                environ, "HCP_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS,
            ),
            output_dir=environ.get("HCP_OUTPUT_DIR") or ".",
        )

    def botocore_config(self):
        return BotoConfig(
            region_name=self.region,
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={
                "max_attempts": self.max_attempts,
                "mode": "standard",
            },
        )


@dataclass(frozen=True)
class ClientBundle:
    """The IAM and CloudWatch Logs clients, read-only once created
    """
    iam: Any
    logs: Any


def _read_int(environ, key, default):
    value = environ.get(key)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ConfigError(
            f"{key} should be an integer, got: {value}"
        ) from error


def load_environment(dotenv_path=None):
    """Loads the .env file into os.environ, existing variables win
    """
    loaded = load_dotenv(
        dotenv_path=dotenv_path or find_dotenv(usecwd=True),
        override=False,
    )
    LOGGER.debug("Loaded .env file: %s", loaded)
    return loaded


def get_partition(region_name: str) -> str:
    """Given the region, this function will return the appropriate partition.

    :param region_name: The name of the region (us-east-1, us-gov-west-1, cn-north-1)
    :raises ConfigError: If the provided region is not supported.
    :return: Returns the partition name as a string.
    """
    try:
        partition = Session().get_partition_for_region(region_name)
    except UnknownRegionError as error:
        raise ConfigError(
            f'The region {region_name} is not supported.'
        ) from error
    return partition


def create_clients(config: Config) -> ClientBundle:
    """
    Creates the IAM and CloudWatch Logs clients used for every customer.
    Missing credentials are passed as None, leaving the lookup to boto3.
    """
    boto_config = config.botocore_config()
    client_kwargs = {
        "region_name": config.region,
        "aws_access_key_id": config.access_key_id,
        "aws_secret_access_key": config.secret_access_key,
        "config": boto_config,
    }
    LOGGER.debug(
        "Creating clients in %s (connect timeout %ss, read timeout %ss, "
        "max attempts %s)",
        config.region,
        config.connect_timeout,
        config.read_timeout,
        config.max_attempts,
    )
    return ClientBundle(
        iam=boto3.client("iam", **client_kwargs),
        logs=boto3.client("logs", **client_kwargs),
    )
