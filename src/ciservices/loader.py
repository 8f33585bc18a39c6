"""Read and write service lists in the forms the dashboard accepts.

The dashboard takes its services from a ``services_base64`` query
parameter, a ``services_url`` or a ``services.json`` file, all holding the
same JSON array of camelCase records.
"""

import base64
import binascii
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import boto3
from botocore.exceptions import ClientError

from ciservices.models import Service, ServiceCatalog

logger = logging.getLogger(__name__)


class ServiceDataError(ValueError):
    """Raised when a services payload cannot be decoded or read."""


@lru_cache(maxsize=1)
def get_s3_client():
    return boto3.client("s3")


def sanitize_services(raw: Any) -> List[Dict[str, Any]]:
    """Drop entries that cannot describe a service.

    Non-list input yields an empty list. Entries that are not objects or
    whose name is falsy are skipped; ``name`` and ``url`` default to "".
    Entry values win over the defaults, so a non-string name is kept and
    left for validation to reject.
    """
    if not isinstance(raw, list):
        return []

    sanitized = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        service = {"name": "", "url": "", **entry}
        if not service["name"]:
            logger.debug(f"Skipping service without a name: {entry!r}")
            continue
        sanitized.append(service)
    return sanitized


def parse_services(raw: Any, sanitize: bool = False) -> List[Service]:
    if sanitize:
        raw = sanitize_services(raw)
    return ServiceCatalog.model_validate(raw).root


def services_from_json(text: str, sanitize: bool = False) -> List[Service]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse services JSON: {e}")
        raise ServiceDataError(f"services payload is not valid JSON: {e}") from e
    return parse_services(raw, sanitize=sanitize)


def services_from_base64(data: str, sanitize: bool = False) -> List[Service]:
    try:
        text = base64.b64decode(data, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.error(f"Failed to parse base64 services: {e}")
        raise ServiceDataError(f"services payload is not valid base64: {e}") from e
    return services_from_json(text, sanitize=sanitize)


def services_to_json(services: Iterable[Service], indent: Optional[int] = None) -> str:
    payload = [
        service.model_dump(mode="json", by_alias=True, exclude_none=True)
        for service in services
    ]
    return json.dumps(payload, indent=indent)


def services_to_base64(services: Iterable[Service]) -> str:
    return base64.b64encode(services_to_json(services).encode("utf-8")).decode("ascii")


def _decode_body(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Services from {source} are not valid UTF-8: {e}")
        raise ServiceDataError(f"{source} is not valid UTF-8: {e}") from e


def load_services_from_url(url: str, sanitize: bool = False) -> List[Service]:
    """Load a services list from ``s3://bucket/key`` or a local path.

    Local sources must be ``.json`` files.
    """
    parsed = urlparse(url)

    if parsed.scheme == "s3":
        bucket = parsed.netloc
        key = parsed.path.lstrip("/")
        if not bucket or not key:
            raise ServiceDataError(f"S3 url must name a bucket and a key: {url}")
        try:
            response = get_s3_client().get_object(Bucket=bucket, Key=key)
            data = response["Body"].read()
        except ClientError as e:
            error_message = e.response.get("Error", {}).get("Message", "Unknown error")
            logger.error(f"Failed to fetch services from {url}: {error_message}")
            raise ServiceDataError(f"could not fetch {url}: {error_message}") from e
    else:
        if parsed.scheme == "file":
            path = Path(url2pathname(parsed.path))
        else:
            path = Path(url)
        if path.suffix.lower() != ".json":
            raise ServiceDataError(f"services file must be a .json file: {path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read services from {path}: {e}")
            raise ServiceDataError(f"could not read {path}: {e}") from e

    services = services_from_json(_decode_body(data, url), sanitize=sanitize)
    logger.info(f"Loaded {len(services)} services from {url}")
    return services
