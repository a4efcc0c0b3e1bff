"""Pipeline module - input reading, name handling and record dispatch."""

from service_reports.pipeline.models import ProcessingResult
from service_reports.pipeline.names import (
    ServiceNameList,
    are_similar_names,
    levenshtein_distance,
    normalize_service_name,
)
from service_reports.pipeline.reader import InputReader

__all__ = [
    "InputReader",
    "ProcessingResult",
    "ServiceNameList",
    "are_similar_names",
    "levenshtein_distance",
    "normalize_service_name",
]
