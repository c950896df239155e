"""Weighted multi-criteria scoring - ranks decision options by weighted sum"""

from typing import List, Optional, Sequence
from clarity_compass.domain.models import Criterion, Option, RankedResult


def score_option(option: Option, criteria: Sequence[Criterion]) -> float:
    """
    Weighted sum of an option's scores.

    Each criterion contributes score * weight / 100. Criteria without a name or
    with zero weight are skipped, and a score missing from the option counts as 0.

    Example (weights Cost 50, Quality 30, Deadline 20):
        scores {Cost: 10, Quality: 6, Deadline: 8}
        10 * 0.5 + 6 * 0.3 + 8 * 0.2 = 8.4
    """
    total_score = 0.0
    for criterion in criteria:
        if not criterion.name or criterion.weight == 0:
            continue
        score = option.scores.get(criterion.name) or 0
        total_score += score * (criterion.weight / 100)
    return total_score


def calculate_weighted_scores(
    criteria: Optional[Sequence[Criterion]],
    options: Optional[Sequence[Option]],
) -> List[RankedResult]:
    """
    Rank options by weighted score, best first.

    - No criteria (None or empty) or no options (None): empty ranking
    - Options without a name are scored but left out of the ranking
    - Equal scores keep their input order (stable sort)
    """
    if not criteria or options is None:
        return []

    results = [RankedResult(name=opt.name, score=score_option(opt, criteria)) for opt in options]
    named = [r for r in results if r.name]

    return sorted(named, key=lambda r: r.score, reverse=True)
