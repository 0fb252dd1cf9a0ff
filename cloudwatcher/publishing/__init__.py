"""
Publication of decoded readings as named weather parameters.

- ``catalog``: The fixed set of parameters, their ranges and critical flags.
- ``publisher``: Registration and refresh against a ``ParameterRegistry``.
- ``registry``: An in-memory registry used by the local server.
"""
from cloudwatcher.publishing.catalog import PARAMETERS_BY_NAME, WEATHER_PARAMETERS, ParameterDefinition
from cloudwatcher.publishing.publisher import ParameterPublisher, ParameterRegistry, PropertyState
from cloudwatcher.publishing.registry import InMemoryParameterRegistry, PublishedParameter

__all__ = [
    "PARAMETERS_BY_NAME",
    "WEATHER_PARAMETERS",
    "ParameterDefinition",
    "ParameterPublisher",
    "ParameterRegistry",
    "PropertyState",
    "InMemoryParameterRegistry",
    "PublishedParameter",
]
