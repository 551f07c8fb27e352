# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
CloudWatch Logs module used to create the log group of each customer
"""

from botocore.exceptions import BotoCoreError, ClientError

from .errors import service_error_from


class CloudWatchLogs:
    def __init__(self, client) -> None:
        """
        client: Any Boto3 CloudWatch Logs client
        """
        self.client = client

    def create_log_group(self, log_group_name):
        try:
            return self.client.create_log_group(logGroupName=log_group_name)
        except (ClientError, BotoCoreError) as error:
            raise service_error_from("CreateLogGroup", error) from error
