"""Contributor-side helpers: file encoding, submission coordination, HTTP client."""

from .api_client import CatalogClient, CatalogClientError, describe_error
from .concurrency import ConcurrencyGuard
from .encoder import EncodedAssets, encode_files
from .submitter import SubmissionCoordinator, SubmissionInFlightError

__all__ = [
    "CatalogClient",
    "CatalogClientError",
    "ConcurrencyGuard",
    "EncodedAssets",
    "SubmissionCoordinator",
    "SubmissionInFlightError",
    "describe_error",
    "encode_files",
]
