"""
Field table for the Cloudwatcher ``key=value`` text payload.

Each line of the payload carries one reading. Text fields take the rest of the
line, numeric fields take a leading decimal float and flag fields a leading
decimal integer. Anything after a valid numeric prefix is ignored.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|inf(?:inity)?))",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"\s*([+-]?\d+)")


class FieldKind(Enum):
    TEXT = "text"
    FLOAT = "float"
    FLAG = "flag"


@dataclass(frozen=True)
class PayloadField:
    key: str
    attr: str
    kind: FieldKind
    required: bool = False
    choices: Optional[tuple[int, ...]] = None

    def convert(self, value: str) -> Optional[Union[str, float, int]]:
        """
        Convert the text after ``key=`` into a typed value.

        Returns:
            The converted value, or ``None`` if the text does not fit the
            field's grammar.
        """
        if self.kind is FieldKind.TEXT:
            return value or None
        pattern = _FLOAT_RE if self.kind is FieldKind.FLOAT else _INT_RE
        match = pattern.match(value)
        if not match:
            return None
        if self.kind is FieldKind.FLOAT:
            return float(match.group(1))
        number = int(match.group(1))
        if self.choices is not None and number not in self.choices:
            return None
        return number


# Matching order; the first field whose key and grammar both match wins.
PAYLOAD_FIELDS: tuple[PayloadField, ...] = (
    PayloadField("dataGMTTime", "timestamp", FieldKind.TEXT, required=True),
    PayloadField("cwinfo", "device_info", FieldKind.TEXT, required=True),
    PayloadField("clouds", "clouds", FieldKind.FLOAT, required=True),
    PayloadField("temp", "temperature", FieldKind.FLOAT, required=True),
    PayloadField("wind", "wind", FieldKind.FLOAT),
    PayloadField("gust", "gust", FieldKind.FLOAT),
    PayloadField("rain", "rain", FieldKind.FLOAT),
    PayloadField("lightmpsas", "sky_quality", FieldKind.FLOAT, required=True),
    PayloadField("switch", "switch", FieldKind.FLAG, choices=(0, 1)),
    PayloadField("safe", "safe", FieldKind.FLAG),
    PayloadField("hum", "humidity", FieldKind.FLOAT),
    PayloadField("dewp", "dew_point", FieldKind.FLOAT),
    PayloadField("rawir", "raw_ir", FieldKind.FLOAT),
    PayloadField("abspress", "abs_pressure", FieldKind.FLOAT),
    PayloadField("relpress", "rel_pressure", FieldKind.FLOAT),
)

FIELDS_BY_KEY: dict[str, PayloadField] = {f.key: f for f in PAYLOAD_FIELDS}

# Order in which missing required fields are reported.
REQUIRED_KEYS: tuple[str, ...] = ("dataGMTTime", "cwinfo", "clouds", "lightmpsas", "temp")
