# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
Provisions the HCP audit log stream resources of a single customer.

Theory of operation:
    1. Create the CloudWatch log group `hcp_log_<customer>`.
    2. Create the IAM role `<customer>-hcp-cloudwatch-audit-role` that the
       external HCP account may assume with the shared external id.
    3. Attach the inline log access policy to that role.

    The calls run in order, as the later calls depend on the names and
    identifiers produced by the earlier ones. A failure stops the
    provisioning of the customer, resources created by earlier steps are
    left in place.
"""

from dataclasses import dataclass

from .config import get_partition
from .iam import IAM
from .logger import configure_logger
from .logs import CloudWatchLogs
from .policy import build_log_access_policy, build_trust_policy

LOGGER = configure_logger(__name__)


@dataclass(frozen=True)
class ProvisioningResult:
    customer_name: str
    role_arn: str
    log_group_name: str
    region: str


def log_group_name_for(customer_name):
    return f"hcp_log_{customer_name}"


def role_name_for(customer_name):
    return f"{customer_name}-hcp-cloudwatch-audit-role"


def policy_name_for(customer_name):
    return f"HCPCloudWatchWrite-{customer_name}"


def setup_customer_hcp_stream(clients, config, customer, log_access_policy=None):
    """
    Creates the log group, the cross-account role and its inline policy
    for the given customer.

    :param clients: The ClientBundle holding the IAM and Logs clients.
    :param config: The Config, used for the region.
    :param customer: The CustomerRequest to provision.
    :param log_access_policy: The inline policy to attach, defaults to the
        (broad) build_log_access_policy() document.
    :raises ServiceError: When any of the AWS calls fail.
    :return: The ProvisioningResult of the customer.
    """
    logs = CloudWatchLogs(clients.logs)
    iam = IAM(clients.iam)
    trust_policy = build_trust_policy(
        customer.external_account_id,
        customer.external_id,
        partition=get_partition(config.region),
    )

    log_group_name = log_group_name_for(customer.name)
    LOGGER.info("[Step 1] Creating log group: %s", log_group_name)
    logs.create_log_group(log_group_name)
    LOGGER.info("✅ Log group created: %s", log_group_name)

    role_name = role_name_for(customer.name)
    LOGGER.info("[Step 2] Creating IAM Role: %s", role_name)
    role_arn = iam.create_role(
        role_name,
        trust_policy,
        f"Role for HCP audit log streaming from {customer.name}",
    )
    LOGGER.info("✅ IAM role created: %s", role_arn)

    iam.put_role_policy(
        role_name,
        policy_name_for(customer.name),
        log_access_policy or build_log_access_policy(),
    )
    LOGGER.info("✅ Attached log group write policy to %s", role_name)

    return ProvisioningResult(
        customer_name=customer.name,
        role_arn=role_arn,
        log_group_name=log_group_name,
        region=config.region,
    )
