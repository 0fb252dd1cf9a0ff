"""
Decoder for the Cloudwatcher text payload.

The device answers an HTTP GET with one ``key=value`` reading per line. The
decoder is tolerant of unknown lines but strict about the readings every
snapshot needs.
"""
from __future__ import annotations

import logging
from typing import Any, Union

from cloudwatcher.parsing.payload.fields import FIELDS_BY_KEY, PAYLOAD_FIELDS, REQUIRED_KEYS, FieldKind, PayloadField
from cloudwatcher.parsing.payload.model import MissingRequiredField, Snapshot, SwitchState, UnrecognizedField

logger = logging.getLogger(__name__)


def _match_line(line: str) -> tuple[PayloadField, Any] | None:
    for payload_field in PAYLOAD_FIELDS:
        prefix = f"{payload_field.key}="
        if not line.startswith(prefix):
            continue
        value = payload_field.convert(line[len(prefix):])
        if value is None:
            continue
        return payload_field, value
    return None


def _typed_value(payload_field: PayloadField, value: Any) -> Any:
    if payload_field.kind is not FieldKind.FLAG:
        return value
    if payload_field.attr == "switch":
        return SwitchState(value)
    return bool(value)


def parse_payload(raw: str) -> Union[Snapshot, MissingRequiredField]:
    """
    Decode a raw response body into a ``Snapshot``.

    Lines are matched against the known fields in order; the last occurrence
    of a duplicated key wins. Lines that match no field are logged and kept as
    ``UnrecognizedField`` warnings on the snapshot.

    Args:
        raw: The response body as text.

    Returns:
        A ``Snapshot`` when every required reading is present, otherwise a
        ``MissingRequiredField`` naming the first missing wire key.
    """
    values: dict[str, Any] = {}
    warnings: list[UnrecognizedField] = []

    for line in raw.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        matched = _match_line(line)
        if matched is None:
            logger.warning("Did not understand value: %s", line)
            warnings.append(UnrecognizedField(line))
            continue
        payload_field, value = matched
        values[payload_field.attr] = _typed_value(payload_field, value)

    for key in REQUIRED_KEYS:
        if FIELDS_BY_KEY[key].attr not in values:
            return MissingRequiredField(key)

    return Snapshot(**values, warnings=tuple(warnings))
