"""Ranking domain service."""

import logfire

from topten.domain.model.score import ItemScore
from topten.domain.model.top_ten_list import TopTenList

from .base import Service
from .scoring import rank, score_item


class RankingService(Service):
    """Domain service that orders a list's items by score."""

    def rank_list(self, top_ten_list: TopTenList) -> list[ItemScore]:
        """Score every item against the list's criteria and rank them.

        Args:
            top_ten_list: List to rank

        Returns:
            Item scores, best first. Equal scores keep the order in which
            the items were added.
        """
        with logfire.span(
            "ranking_service.rank_list",
            list_id=top_ten_list.id,
            items=len(top_ten_list.items),
        ):
            total_criteria = len(top_ten_list.criteria)
            return rank(score_item(item, total_criteria) for item in top_ten_list.items)
