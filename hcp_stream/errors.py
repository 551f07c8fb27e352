# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
A collection of all Error Types used in hcp-stream
"""


class Error(Exception):
    """Base class for exceptions in this module.
    """
    pass


class ConfigError(Error):
    """
     Required configuration is missing or invalid, raised before any
     customer is processed.
    """
    pass


class ServiceError(Error):
    """
    An AWS API call failed (name collision, access denied, network fault).
    """

    def __init__(self, operation, message, error_code=None):
        self.operation = operation
        self.error_code = error_code
        super().__init__(
            f"{operation} failed"
            + (f" ({error_code})" if error_code else "")
            + f": {message}"
        )


class InvalidRoleArnError(Error):
    """
    The role ARN does not have the expected <prefix>/<role-name> format.
    """
    pass


def service_error_from(operation, error):
    """Builds a ServiceError out of a botocore ClientError or BotoCoreError
    """
    details = getattr(error, "response", None) or {}
    return ServiceError(
        operation,
        details.get("Error", {}).get("Message") or str(error),
        error_code=details.get("Error", {}).get("Code"),
    )
