"""Walk use cases: traversal and entry dispatch."""
