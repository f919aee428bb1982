"""
relalg: finite-set and binary-relation algebra.

Provides:
- FiniteSet: Order-independent finite set with union/intersection/complement
- Relation: Binary relation over a base set, property checks and closures
- rel_union/rel_inter/rel_compl/rel_compo: Relation combinators
- to_digraph/from_digraph/reachable_from: NetworkX bridge
- RelalgConfig: Environment-driven configuration
"""
from .config import (
    RelalgConfig,
    configure_logging,
    get_config,
    load_config,
    validate_config,
)
from .sets import (
    FiniteSet,
    complement,
    intersection,
    union,
)
from .relation import (
    Link,
    LinkValidationError,
    Relation,
    RelationError,
)
from .algebra import (
    rel_compl,
    rel_compo,
    rel_inter,
    rel_union,
)
from .graph import (
    from_digraph,
    reachable_from,
    to_digraph,
)

__all__ = [
    "FiniteSet",
    "Link",
    "LinkValidationError",
    "Relation",
    "RelationError",
    "RelalgConfig",
    "complement",
    "configure_logging",
    "from_digraph",
    "get_config",
    "intersection",
    "load_config",
    "reachable_from",
    "rel_compl",
    "rel_compo",
    "rel_inter",
    "rel_union",
    "to_digraph",
    "union",
    "validate_config",
]
