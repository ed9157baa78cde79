# Streaming experiment components for lexicon word classification

from .online_evaluator import OnlineEvaluator, ReportRow, REPORT_FIELDS
from .stream_pipeline import StreamPipeline

__all__ = [
    "OnlineEvaluator",
    "ReportRow",
    "REPORT_FIELDS",
    "StreamPipeline",
]
