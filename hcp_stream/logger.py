# Copyright Amazon.com Inc. or its affiliates.
# SPDX-License-Identifier: MIT-0

"""Primary Logging Configuration Function
"""

import logging
import os


def get_log_level():
    """Level from HCP_LOG_LEVEL, INFO when unset or unknown
    """
    level = logging.getLevelName(
        os.environ.get("HCP_LOG_LEVEL", "INFO").upper()
    )
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logger(logger_name):
    """Configures a generic logger which can be imported and used as needed
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(get_log_level())
    logger.propagate = False

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(message)s')

    # One handler per logger, even when configured twice.
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger


def set_log_level(level):
    """Changes the level of every hcp_stream logger configured so far
    """
    for name in list(logging.root.manager.loggerDict):
        if name == "hcp_stream" or name.startswith("hcp_stream."):
            logging.getLogger(name).setLevel(level)
