"""World crime rate map dashboard."""
