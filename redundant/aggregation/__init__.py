from .table import SentenceRecord, AggregationTable

__all__ = [
    "SentenceRecord",
    "AggregationTable",
]
