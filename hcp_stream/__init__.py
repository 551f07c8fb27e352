# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""__init__
"""

__version__ = "1.0.0"
