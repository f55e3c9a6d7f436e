"""
Ranking Module - read-side views derived from point totals.

Public API:
- RankingService: rank_of, top_by_points, top_endorsers, user_stats
- EndorserStanding, UserStats: result dataclasses
"""

from core.ranking.models import EndorserStanding, UserStats
from core.ranking.service import RankingService

__all__ = ['RankingService', 'EndorserStanding', 'UserStats']
