"""
Scoring Module - points, endorsement counts and levels.

Public API:
- ScoringEngine: applies every point/count-affecting mutation
- level_for_points: level derivation (re-exported from core.levels)
"""

from core.levels import level_for_points
from core.scoring.service import ScoringEngine

__all__ = ['ScoringEngine', 'level_for_points']
