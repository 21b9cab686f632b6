"""Readers for node data files."""

from .data_handler import NodeFileData, parse_node_file, load_node_data

__all__ = [
    "NodeFileData",
    "parse_node_file",
    "load_node_data"
]
