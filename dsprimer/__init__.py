"""Textbook data structures and algorithms: lists, linked lists, stacks, queues, string matching, binary trees, graphs and quick sort."""

__version__ = "0.1.15"