"""Graph configuration flags."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GraphOptions:
    """The three flags fixed at graph construction.

    directed:   False makes (a, b) and (b, a) the same edge.
    multigraph: True allows several named edges between one pair of nodes.
    compound:   True enables the parent/child tree over nodes.
    """
    directed: bool = True
    multigraph: bool = False
    compound: bool = False
