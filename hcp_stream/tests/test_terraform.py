# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""Tests for terraform.py"""

# pylint: skip-file

import os
from unittest.mock import patch

import pytest

from hcp_stream.errors import InvalidRoleArnError
from hcp_stream.provisioner import ProvisioningResult
from hcp_stream.terraform import (
    LOG_RETENTION_IN_DAYS,
    file_name_for,
    render_main_tf,
    role_name_from_arn,
    write_main_tf,
)

ROLE_ARN = "arn:aws:iam::111111111111:role/unosecur-hcp-cloudwatch-audit-role"

EXPECTED_MAIN_TF = """terraform {
  required_providers {
    aws = {
      source  = "hashicorp/aws"
      version = "~> 5.0"
    }
  }
}

provider "aws" {
  region = "eu-west-1"
}

resource "aws_cloudwatch_log_group" "hcp_log" {
  name              = "hcp_log_unosecur"
  retention_in_days = 30
}

resource "aws_iam_role" "hcp_audit_role" {
  name = "unosecur-hcp-cloudwatch-audit-role"
}

output "destination_name" {
  value = "hcp-unosecur"
}

output "role_arn" {
  value = "arn:aws:iam::111111111111:role/unosecur-hcp-cloudwatch-audit-role"
}

output "region" {
  value = "eu-west-1"
}"""


@pytest.fixture
def result():
    return ProvisioningResult(
        customer_name="unosecur",
        role_arn=ROLE_ARN,
        log_group_name="hcp_log_unosecur",
        region="eu-west-1",
    )


def test_role_name_from_arn():
    assert role_name_from_arn(ROLE_ARN) == "unosecur-hcp-cloudwatch-audit-role"


@pytest.mark.parametrize('role_arn', [
    "arn:aws:iam::111111111111:role",
    "arn:aws:iam::111111111111:role/",
    "arn:aws:iam::111111111111:role/some/path/name",
    "",
])
def test_role_name_from_arn_invalid(role_arn):
    with pytest.raises(InvalidRoleArnError) as excinfo:
        role_name_from_arn(role_arn)

    assert "exactly one '/'" in str(excinfo.value)


def test_file_name_for():
    assert file_name_for("unosecur") == "main_unosecur.tf"


def test_render_main_tf(result):
    assert LOG_RETENTION_IN_DAYS == 30
    assert render_main_tf(result) == EXPECTED_MAIN_TF


def test_render_main_tf_is_deterministic(result):
    assert render_main_tf(result) == render_main_tf(result)


def test_render_main_tf_has_no_policy_block(result):
    rendered = render_main_tf(result)
    assert "aws_iam_role_policy" not in rendered
    assert rendered.count('resource "') == 2
    assert rendered.count('output "') == 3


def test_render_main_tf_invalid_arn(result):
    broken = ProvisioningResult(
        customer_name=result.customer_name,
        role_arn="not-an-arn",
        log_group_name=result.log_group_name,
        region=result.region,
    )
    with pytest.raises(InvalidRoleArnError):
        render_main_tf(broken)


@patch("hcp_stream.terraform.LOGGER")
def test_write_main_tf(logger, result, tmp_path, capsys):
    output_path = write_main_tf(result, str(tmp_path))

    assert output_path == os.path.join(str(tmp_path), "main_unosecur.tf")
    with open(output_path, encoding="utf-8") as file_handler:
        assert file_handler.read() == EXPECTED_MAIN_TF

    logger.info.assert_called_once_with(
        "📄 Created Terraform file: %s",
        output_path,
    )
    printed = capsys.readouterr().out
    assert printed.splitlines()[1:] == [
        "Next steps for the customer:",
        "1. terraform init",
        "2. terraform import aws_cloudwatch_log_group.hcp_log hcp_log_unosecur",
        f"3. terraform import aws_iam_role.hcp_audit_role {ROLE_ARN}",
    ]


@patch("hcp_stream.terraform.LOGGER")
def test_write_main_tf_overwrites(logger, result, tmp_path):
    existing = tmp_path / "main_unosecur.tf"
    existing.write_text("stale content", encoding="utf-8")

    write_main_tf(result, str(tmp_path))

    assert existing.read_text(encoding="utf-8") == EXPECTED_MAIN_TF


@patch("hcp_stream.terraform.LOGGER")
def test_write_main_tf_invalid_arn_writes_nothing(logger, tmp_path):
    broken = ProvisioningResult(
        customer_name="unosecur",
        role_arn="arn:aws:iam::111111111111:role/a/b",
        log_group_name="hcp_log_unosecur",
        region="eu-west-1",
    )

    with pytest.raises(InvalidRoleArnError):
        write_main_tf(broken, str(tmp_path))

    assert os.listdir(str(tmp_path)) == []
    logger.info.assert_not_called()
