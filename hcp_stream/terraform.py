# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
Module used for generating the Terraform file that a customer uses to import
the resources that were provisioned on their behalf.
"""

import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .errors import InvalidRoleArnError
from .logger import configure_logger

LOGGER = configure_logger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), 'templates')
TEMPLATE_NAME = 'main.tf.j2'
LOG_RETENTION_IN_DAYS = 30


def role_name_from_arn(role_arn):
    """
    Returns the role name of an ARN like arn:aws:iam::111111111111:role/name.

    :raises InvalidRoleArnError: If the ARN does not contain exactly one `/`
        followed by a role name.
    """
    parts = role_arn.split("/")
    if len(parts) != 2 or not parts[1]:
        raise InvalidRoleArnError(
            f"Expected a role ARN with exactly one '/', got: {role_arn}"
        )
    return parts[1]


def file_name_for(customer_name):
    return f"main_{customer_name}.tf"


def render_main_tf(result):
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        undefined=StrictUndefined,
    )
    template = env.get_template(TEMPLATE_NAME)
    output_template = template.render(
        customer_name=result.customer_name,
        role_arn=result.role_arn,
        role_name=role_name_from_arn(result.role_arn),
        log_group_name=result.log_group_name,
        region=result.region,
        retention_in_days=LOG_RETENTION_IN_DAYS,
    )
    return output_template.strip()


def write_main_tf(result, output_dir="."):
    """
    Renders the Terraform file of the customer and writes it to the output
    directory, replacing the file if it exists already.

    :return: The path of the file that was written.
    """
    content = render_main_tf(result)
    output_path = os.path.join(output_dir, file_name_for(result.customer_name))
    with open(output_path, mode='w', encoding='utf-8') as file_handler:
        file_handler.write(content)
    LOGGER.info("📄 Created Terraform file: %s", output_path)

    print_next_steps(result)
    return output_path


def print_next_steps(result):
    print("\nNext steps for the customer:")
    print("1. terraform init")
    print(
        "2. terraform import aws_cloudwatch_log_group.hcp_log "
        f"{result.log_group_name}"
    )
    print(
        "3. terraform import aws_iam_role.hcp_audit_role "
        f"{result.role_arn}"
    )
