# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

import sys

from .main import main

sys.exit(main())
