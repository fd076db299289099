"""Scoring engine.

Turns an item's sparse, multi-user, multi-criterion ratings into one
comparable score in [0, 1]:

    score = (sum of per-criterion means / (rated criteria * 5))
            * (rated criteria / total criteria)

Only ratings with a value above zero count. "No experience" (-1) ratings
are stored but never scored. The second factor is the completeness discount:
an item rated on one of five criteria cannot beat an item rated well on all
five just because its single rating was a 5. Without a criteria total the
discount is skipped.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence

from topten.domain.model.item import Item
from topten.domain.model.score import CriterionScore, ItemScore
from topten.domain.value import MAX_RATING, CriterionId, UserId


def score_item(item: Item, total_criteria_count: int | None = None) -> ItemScore:
    """Score one item.

    Args:
        item: Item with its ratings
        total_criteria_count: Number of criteria in the list. When given and
            positive, the completeness discount is applied.

    Returns:
        Score with per-criterion means and counts. Criteria without any
        scored rating are absent from ``criteria_scores``.
    """
    values_by_criterion: dict[CriterionId, list[int]] = defaultdict(list)
    ratings_by_user: dict[UserId, int] = defaultdict(int)

    for rating in item.ratings:
        if not rating.is_scored:
            continue
        values_by_criterion[rating.criterion_id].append(rating.value)
        ratings_by_user[rating.user_id] += 1

    criteria_scores = {
        criterion_id: CriterionScore(
            average=sum(values) / len(values), count=len(values)
        )
        for criterion_id, values in values_by_criterion.items()
    }

    rated_criteria = len(criteria_scores)
    average_score = 0.0
    if rated_criteria > 0:
        sum_of_averages = sum(s.average for s in criteria_scores.values())
        average_score = sum_of_averages / (rated_criteria * MAX_RATING)
        if total_criteria_count and total_criteria_count > 0:
            average_score *= rated_criteria / total_criteria_count

    return ItemScore(
        item=item,
        average_score=average_score,
        total_ratings=sum(s.count for s in criteria_scores.values()),
        criteria_scores=criteria_scores,
        ratings_by_user=dict(ratings_by_user),
    )


def rank(scores: Iterable[ItemScore]) -> list[ItemScore]:
    """Order scores best first.

    ``sorted`` is stable, so equal scores keep their input order.
    """
    return sorted(scores, key=lambda s: s.average_score, reverse=True)


def user_rated_count(items: Sequence[Item], user_id: UserId) -> int:
    """Count items the user has given at least one scored rating."""
    return sum(
        1
        for item in items
        if any(r.user_id == user_id and r.is_scored for r in item.ratings)
    )
