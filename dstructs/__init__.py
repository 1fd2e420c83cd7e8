"""Classic data structures and graph algorithms: stacks, queues, linked lists,
hash tables, sparse matrices, tries, disjoint sets, search trees, heaps,
B-trees, B+ trees and directed weighted graphs."""

__version__ = "0.1.0"