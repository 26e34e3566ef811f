"""
Types for hREA Docs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, TypeAlias


# ======================================
# Enums
# ======================================

class ImplementationStatus(Enum):
    """Whether a resolver does real work or is a throwing stub."""
    IMPLEMENTED = "Implemented"
    UNIMPLEMENTED = "Unimplemented"


class ResolverKind(Enum):
    """Resolver folder in vf-graphql-holochain."""
    QUERIES = "queries"
    MUTATIONS = "mutations"

    @property
    def root_type(self) -> str:
        """GraphQL root type holding this kind's fields."""
        return "Mutation" if self is ResolverKind.MUTATIONS else "Query"


# ======================================
# Records
# ======================================

@dataclass(frozen=True)
class ResolverRecord:
    """One named entry of a resolver map."""
    name: str
    description: str
    implementation_status: ImplementationStatus

    @property
    def implemented(self) -> bool:
        return self.implementation_status is ImplementationStatus.IMPLEMENTED


@dataclass
class ModuleDoc:
    """Queries and mutations owned by one ValueFlows module."""
    module_name: str                                    # snake case, e.g. "process_specification"
    queries: List[ResolverRecord] = field(default_factory=list)
    mutations: List[ResolverRecord] = field(default_factory=list)


# ======================================
# Type Aliases
# ======================================

# file base name -> records in declaration order
ScanResult: TypeAlias = Dict[str, List[ResolverRecord]]

# module name -> class / file base names
ModuleTable: TypeAlias = Dict[str, List[str]]
