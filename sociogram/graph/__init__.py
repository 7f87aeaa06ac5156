"""
Graph construction for the classroom sociogram
"""

from .graph_builder import GraphBuilder, to_networkx

__all__ = ["GraphBuilder", "to_networkx"]
