"""wdgraph custom exceptions."""


class GraphError(Exception):
    """Base exception for wdgraph errors."""


class NodeNotFoundError(GraphError, LookupError):
    """Node not found in the graph."""


class EndpointNotFoundError(NodeNotFoundError):
    """Source or destination node of an edge operation not found in the graph."""


class CursorError(GraphError, IndexError):
    """Cursor used outside the range of the graph's edges."""
