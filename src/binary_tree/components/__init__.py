"""Building blocks of the binary tree: nodes, traversals and renderers."""
