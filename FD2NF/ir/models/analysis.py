"""Pydantic models for the output of one analysis batch.

Fields are snake_case in Python and serialize with camelCase aliases
(``attributeClosures``, ``isSecondNF`` ...), which is the contract consumed by
presentation layers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NormalForm(str, Enum):
    """Normal forms the engine decides."""
    SECOND = "2NF"
    THIRD = "3NF"
    BOYCE_CODD = "BCNF"


class _ContractModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttributeClosureItem(_ContractModel):
    """Closure of one subset of the attribute universe."""
    subset: List[str]
    closure: List[str]
    super_key: bool = False
    candidate_key: bool = False


class DependencyClosureItem(_ContractModel):
    """One member of F+ with its diagnostic flags."""
    lhs: List[str]
    rhs: List[str]
    trivial: bool
    violation: Optional[NormalForm] = None


class MinimalCoverItem(_ContractModel):
    lhs: List[str]
    rhs: List[str]


class SchemaAnalysis(_ContractModel):
    """Everything one query batch computes for a schema."""
    attribute_closures: List[AttributeClosureItem] = Field(default_factory=list)
    dependency_closure: List[DependencyClosureItem] = Field(default_factory=list)
    is_second_nf: bool = Field(alias="isSecondNF")
    is_third_nf: bool = Field(alias="isThirdNF")
    is_bcnf: bool = Field(alias="isBCNF")
    candidate_keys: List[List[str]] = Field(default_factory=list)
    prime_attributes: List[str] = Field(default_factory=list)
    minimal_cover: List[MinimalCoverItem] = Field(default_factory=list)


class ErrorInfo(_ContractModel):
    """Structured details attached to a failed response."""
    type: str
    operation: Optional[str] = None
    kind: Optional[str] = None
    position: Optional[int] = None


class WorkerResponse(_ContractModel):
    """Exactly one of these answers every analysis request."""
    successful: bool
    data: Optional[SchemaAnalysis] = None
    message: Optional[str] = None
    error: Optional[ErrorInfo] = None

    @classmethod
    def success(cls, data: SchemaAnalysis) -> "WorkerResponse":
        return cls(successful=True, data=data)

    @classmethod
    def failure(cls, payload: Dict[str, Any]) -> "WorkerResponse":
        """Build from a dict produced by ``create_error_response``."""
        return cls.model_validate(payload)
