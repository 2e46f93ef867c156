"""
Fantasy Football Advisor Agents Module.

This module provides the scoring pipeline and the engine that feeds it.
"""

from .analysis_engine import AnalysisEngine
from .position_analysis import analyze_roster_by_position
from .scoring_pipeline import PipelineResult, ScoringPipeline, calculate_pickup_priority

__all__ = [
    "AnalysisEngine",
    "PipelineResult",
    "ScoringPipeline",
    "analyze_roster_by_position",
    "calculate_pickup_priority",
]
