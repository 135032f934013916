"""
Graph mutation events.

Graph variants react to mutations through listeners instead of subclassing
the mutation engine. A listener implements the four hooks of
GraphMutationListener; any number of listeners can be attached to one graph
and each is notified, in registration order, after the structural change has
been applied.
"""

import logging
from enum import Enum, auto
from typing import Any, Dict, List, Protocol

from ..config import LISTENER_ERRORS_LOG, LISTENER_ERRORS_RAISE
from ..exceptions import ConfigurationError, ListenerError

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Mutations that can occur in the graph."""

    VERTEX_ADDED = auto()
    VERTEX_REMOVED = auto()
    EDGE_ADDED = auto()
    EDGE_REMOVED = auto()


class GraphMutationListener(Protocol):
    """Protocol for objects that react to graph mutations."""

    def on_vertex_added(self, graph: Any, vertex: Any) -> None:
        """Called after a vertex has been registered."""
        ...

    def on_vertex_removed(self, graph: Any, vertex: Any) -> None:
        """Called after a vertex and its edges have been removed."""
        ...

    def on_edge_added(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        """Called after an edge has been registered between head and tail."""
        ...

    def on_edge_removed(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        """Called after an edge has been removed from every index."""
        ...


class BaseMutationListener:
    """Listener with no-op hooks, for observers that need only some of them."""

    def on_vertex_added(self, graph: Any, vertex: Any) -> None:
        pass

    def on_vertex_removed(self, graph: Any, vertex: Any) -> None:
        pass

    def on_edge_added(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        pass

    def on_edge_removed(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        pass


_HOOKS: Dict[GraphEvent, str] = {
    GraphEvent.VERTEX_ADDED: "on_vertex_added",
    GraphEvent.VERTEX_REMOVED: "on_vertex_removed",
    GraphEvent.EDGE_ADDED: "on_edge_added",
    GraphEvent.EDGE_REMOVED: "on_edge_removed",
}


class GraphEventManager:
    """
    Manages mutation listeners and their notification.

    Attributes:
        error_policy (str): "raise" to stop at the first failing listener,
            "log" to log failures and keep notifying
        _listeners (List[GraphMutationListener]): Registered listeners
    """

    def __init__(self, error_policy: str = LISTENER_ERRORS_RAISE):
        if error_policy not in (LISTENER_ERRORS_RAISE, LISTENER_ERRORS_LOG):
            raise ConfigurationError(f"Unknown listener error policy {error_policy!r}")
        self.error_policy = error_policy
        self._listeners: List[GraphMutationListener] = []

    @property
    def listeners(self) -> List[GraphMutationListener]:
        """Registered listeners in notification order."""
        return list(self._listeners)

    def add_listener(self, listener: GraphMutationListener) -> None:
        """
        Add a listener for graph mutations.

        Adding a listener that is already registered has no effect.

        Args:
            listener (GraphMutationListener): The listener to add
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphMutationListener) -> None:
        """
        Remove a mutation listener.

        Args:
            listener (GraphMutationListener): The listener to remove
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, event: GraphEvent, graph: Any, *args: Any) -> None:
        """
        Notify all listeners of a mutation.

        Args:
            event (GraphEvent): The mutation that occurred
            graph: The graph that was mutated
            *args: Hook arguments, (vertex,) or (head, edge, tail)

        Raises:
            ListenerError: If a listener fails and the error policy is "raise"
        """
        hook = _HOOKS[event]
        for listener in list(self._listeners):
            try:
                getattr(listener, hook)(graph, *args)
            except Exception as e:
                if self.error_policy == LISTENER_ERRORS_LOG:
                    logger.exception(f"Listener {listener!r} failed on {event.name}")
                    continue
                logger.error(f"Listener {listener!r} failed on {event.name}: {e}")
                raise ListenerError(f"Listener {listener!r} failed on {event.name}: {e}") from e

    def clear_listeners(self) -> None:
        """Remove all listeners."""
        self._listeners.clear()
