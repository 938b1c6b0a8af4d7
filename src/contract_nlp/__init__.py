"""Rule-based query understanding for contract and parts lookups."""

from .config import IdentifierRules, PipelineConfig
from .pipeline import QueryPipeline
from .schema import QueryResult

__all__ = ["IdentifierRules", "PipelineConfig", "QueryPipeline", "QueryResult"]
