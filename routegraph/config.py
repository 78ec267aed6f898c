"""Configuration classes for routegraph components."""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Behavioural switches shared by graph containers."""

    # Run the invariant checker after every public mutation (debug aid)
    validate_on_mutation: bool = False

    # Weight assigned by from_networkx when an edge has no weight attribute
    default_weight: float = 1.0


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
