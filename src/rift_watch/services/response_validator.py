"""Validation of Live Client payloads against their schemas."""

import json
import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from rift_watch.services.live_client_api import LiveClientError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValidationFailure(LiveClientError):
    """A payload did not match the shape expected for its endpoint."""

    def __init__(self, label: str, raw_payload: Any, errors: list[dict]):
        self.label = label
        self.raw_payload = raw_payload
        self.errors = errors
        super().__init__(f"invalid '{label}' payload: {len(errors)} error(s)")


def _dump(raw_payload: Any) -> str:
    try:
        return json.dumps(raw_payload, indent=2, default=str)
    except (TypeError, ValueError):
        return repr(raw_payload)


def validate(schema: TypeAdapter[T], raw_payload: Any, label: str) -> T:
    """Validate a raw payload, logging everything needed to diagnose drift.

    Args:
        schema: TypeAdapter for the endpoint's payload
        raw_payload: Decoded JSON as returned by the endpoint
        label: Human readable endpoint name for the logs

    Returns:
        The validated payload

    Raises:
        ValidationFailure: If the payload does not match the schema
    """
    try:
        return schema.validate_python(raw_payload)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logger.error(
            f"Failed to parse '{label}' response: {e}\n"
            f"Raw payload:\n{_dump(raw_payload)}",
            extra={"label": label, "raw_payload": raw_payload, "errors": errors},
        )
        raise ValidationFailure(label, raw_payload, errors) from e
