# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""IAM module used to create the HCP audit roles
"""

from botocore.exceptions import BotoCoreError, ClientError

from .errors import service_error_from
from .logger import configure_logger

LOGGER = configure_logger(__name__)


class IAM:
    """Class used for modeling IAM
    """

    def __init__(self, client):
        self.client = client

    def create_role(self, role_name, trust_policy, description):
        """
        Creates the role with the given trust policy and returns its ARN.
        """
        LOGGER.debug("Creating role %s", role_name)
        try:
            response = self.client.create_role(
                RoleName=role_name,
                AssumeRolePolicyDocument=trust_policy.to_json(),
                Description=description,
            )
        except (ClientError, BotoCoreError) as error:
            raise service_error_from("CreateRole", error) from error
        return response['Role']['Arn']

    def put_role_policy(self, role_name, policy_name, policy):
        LOGGER.debug(
            "Putting inline policy %s on role %s",
            policy_name,
            role_name,
        )
        try:
            return self.client.put_role_policy(
                RoleName=role_name,
                PolicyName=policy_name,
                PolicyDocument=policy.to_json(),
            )
        except (ClientError, BotoCoreError) as error:
            raise service_error_from("PutRolePolicy", error) from error
