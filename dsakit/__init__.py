"""Classic data structures and algorithms: sorting, graphs, queues, expression conversion and binary trees."""

__version__ = "0.1.0"
__all__ = ["sorting", "graphs", "queues", "expressions", "trees"]