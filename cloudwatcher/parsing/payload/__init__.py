from cloudwatcher.parsing.payload.decode import parse_payload
from cloudwatcher.parsing.payload.fields import PAYLOAD_FIELDS, REQUIRED_KEYS, FieldKind, PayloadField
from cloudwatcher.parsing.payload.model import (
    DecodeError,
    MissingRequiredField,
    Snapshot,
    SwitchState,
    UnrecognizedField,
)

__all__ = [
    "parse_payload",
    "PAYLOAD_FIELDS",
    "REQUIRED_KEYS",
    "FieldKind",
    "PayloadField",
    "DecodeError",
    "MissingRequiredField",
    "Snapshot",
    "SwitchState",
    "UnrecognizedField",
]
