"""
Configuration for mutable graphs.

GraphConfig collects the switches that change how a graph reacts to
mutations. Configuration coming from untyped sources (parsed files,
application settings) goes through GraphConfig.from_dict, which validates it
against a JSON schema before building the dataclass.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .exceptions import ConfigurationError

LISTENER_ERRORS_RAISE = "raise"
LISTENER_ERRORS_LOG = "log"

GRAPH_CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "allow_self_loops": {"type": "boolean"},
        "notify_cascaded_removals": {"type": "boolean"},
        "listener_errors": {"enum": [LISTENER_ERRORS_RAISE, LISTENER_ERRORS_LOG]},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Behaviour switches for a mutable graph.

    Attributes:
        allow_self_loops (bool): Accept edges whose head equals their tail
        notify_cascaded_removals (bool): Fire edge-removed hooks for edges
            dropped while removing a vertex
        listener_errors (str): "raise" to abort notification with a
            ListenerError, "log" to log the failure and keep notifying
    """

    allow_self_loops: bool = True
    notify_cascaded_removals: bool = True
    listener_errors: str = LISTENER_ERRORS_RAISE

    def __post_init__(self):
        """Validate configuration values."""
        if self.listener_errors not in (LISTENER_ERRORS_RAISE, LISTENER_ERRORS_LOG):
            raise ConfigurationError(
                f"listener_errors must be '{LISTENER_ERRORS_RAISE}' or "
                f"'{LISTENER_ERRORS_LOG}', got {self.listener_errors!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a plain mapping.

        Args:
            data (Mapping[str, Any]): Configuration values; missing keys take
                their defaults

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            validate(instance=dict(data), schema=GRAPH_CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)
