import os
import logging
from functools import lru_cache

import boto3

DEFAULT_REGION = 'us-east-1'
DEFAULT_LOG_LEVEL = 'INFO'


def resolve_region():
    # empty string counts as unset
    return os.environ.get('AWS_REGION') or DEFAULT_REGION


def resolve_log_level():
    level = os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    # getLevelName returns "Level X" for names logging does not know
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def get_logger(name):
    logger = logging.getLogger(name)
    logger.setLevel(resolve_log_level())
    return logger


logger = get_logger(__name__)


@lru_cache(maxsize=None)
def get_s3_client():
    """Build the S3 client once per process; later calls return the same instance."""
    region = resolve_region()
    logger.info("Creating S3 client for region %s", region)
    return boto3.client('s3', region_name=region)
