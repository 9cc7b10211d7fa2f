from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from botocore.exceptions import ClientError


@dataclass(frozen=True)
class BucketSummary:
    name: str
    creation_date: datetime

    @classmethod
    def from_record(cls, record) -> 'BucketSummary':
        if not isinstance(record, dict):
            raise ValueError(f"Malformed bucket record: {record!r}")
        name, created = record.get('Name'), record.get('CreationDate')
        if not isinstance(name, str) or not isinstance(created, datetime):
            raise ValueError(f"Malformed bucket record: {record!r}")
        return cls(name=name, creation_date=created)

    def to_dict(self):
        return {
            'name': self.name,
            'creationDate': self.creation_date.isoformat(),
        }


class ProviderCallFailure(Exception):
    """Raised when the ListBuckets call fails for any reason.

    Covers both a rejected call and a response that cannot be read as a bucket
    list. ``message`` is the provider's own error text when it sent one
    (e.g. ``"Access Denied"``), otherwise the text of the underlying exception.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    @classmethod
    def from_exception(cls, exc: Exception) -> 'ProviderCallFailure':
        if isinstance(exc, ClientError):
            error = exc.response.get('Error', {})
            return cls(error.get('Message') or str(exc), error.get('Code'))
        return cls(str(exc))


def list_buckets(s3_client) -> List[BucketSummary]:
    try:
        resp = s3_client.list_buckets()
        return [BucketSummary.from_record(b) for b in resp.get('Buckets') or []]
    except Exception as e:
        raise ProviderCallFailure.from_exception(e) from e
