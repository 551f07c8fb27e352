# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""
IAM policy documents used for the HCP audit role.

The trust policy allows a single external account to assume the role, as
long as it presents the shared external id (confused deputy protection).

The log access policy is attached inline to the role. Its defaults grant
`logs:*` on every resource. That is far too broad for production use, pass
scoped actions and resources to build_log_access_policy instead.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

POLICY_VERSION = "2012-10-17"

DEFAULT_LOG_ACTIONS = ("logs:*",)
DEFAULT_LOG_RESOURCE = "*"


@dataclass(frozen=True)
class PolicyStatement:
    effect: str
    action: Union[str, List[str]]
    resource: Optional[Union[str, List[str]]] = None
    principal: Optional[Dict[str, str]] = None
    condition: Optional[Dict[str, Dict[str, str]]] = None

    def __post_init__(self):
        if self.effect not in ("Allow", "Deny"):
            raise ValueError(
                f"Effect should be Allow or Deny, got: {self.effect}"
            )

    def to_dict(self):
        statement = {"Effect": self.effect}
        if self.principal is not None:
            statement["Principal"] = self.principal
        statement["Action"] = self.action
        if self.resource is not None:
            statement["Resource"] = self.resource
        if self.condition is not None:
            statement["Condition"] = self.condition
        return statement


@dataclass(frozen=True)
class PolicyDocument:
    statements: List[PolicyStatement] = field(default_factory=list)
    version: str = POLICY_VERSION

    def to_dict(self):
        return {
            "Version": self.version,
            "Statement": [
                statement.to_dict()
                for statement in self.statements
            ],
        }

    def to_json(self):
        return json.dumps(self.to_dict())


def build_trust_policy(external_account_id, external_id, partition="aws"):
    """
    Trust policy that lets the root of the external account assume the
    role when it passes the given external id.
    """
    return PolicyDocument(statements=[
        PolicyStatement(
            effect="Allow",
            principal={
                "AWS": f"arn:{partition}:iam::{external_account_id}:root",
            },
            action="sts:AssumeRole",
            condition={
                "StringEquals": {"sts:ExternalId": external_id},
            },
        ),
    ])


def build_log_access_policy(
        actions=DEFAULT_LOG_ACTIONS,
        resource=DEFAULT_LOG_RESOURCE,
    ):
    return PolicyDocument(statements=[
        PolicyStatement(
            effect="Allow",
            action=list(actions),
            resource=resource,
        ),
    ])
