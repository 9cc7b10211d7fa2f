import os

import boto3
import pytest
from moto import mock_aws

from bucket_config import get_s3_client


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_REGION', 'us-east-1')


@pytest.fixture(autouse=True)
def fresh_client():
    get_s3_client.cache_clear()
    yield
    get_s3_client.cache_clear()


@pytest.fixture
def s3(aws_credentials):
    with mock_aws():
        yield boto3.client('s3', region_name=os.environ['AWS_REGION'])
