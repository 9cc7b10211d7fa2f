import json

from bucket_listing import ProviderCallFailure, list_buckets
from bucket_config import get_logger, get_s3_client

logger = get_logger(__name__)


class BucketListHandler:

    def __init__(self, s3_client):
        self.s3_client = s3_client

    def handle(self, event, context):
        try:
            buckets = list_buckets(self.s3_client)
        except ProviderCallFailure as failure:
            logger.exception("Error listing buckets: %s", failure.message)
            return {"statusCode": 500, "body": json.dumps({"error": failure.message})}

        logger.info("Listed %d buckets", len(buckets))
        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({
                "buckets": [b.to_dict() for b in buckets],
                "count": len(buckets),
            }, indent=2),
        }


def lambda_handler(event, context):
    return BucketListHandler(get_s3_client()).handle(event, context)
