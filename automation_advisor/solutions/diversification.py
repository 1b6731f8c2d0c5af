"""
Maximal Marginal Relevance (MMR) diversification.

Selects top-K recommendations that trade relevance against redundancy:
the first pick is the highest-scoring item, every further pick maximizes

    score - lambda * max_similarity_to_selected

so a candidate that duplicates something already chosen loses up to
lambda of its relevance.
"""

from typing import List, Optional, Sequence

from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig
from automation_advisor.models.solutions import CandidateSolution, ScoredRecommendation


def solution_similarity(
    first: CandidateSolution,
    second: CandidateSolution,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> float:
    """
    Similarity of two solutions in [0, 1].

    Weighted sum of equal category, Jaccard overlap of the raw integration
    sets, equal complexity and equal source.
    """
    similarity = 0.0

    if first.category == second.category:
        similarity += heuristics.category_similarity_weight

    first_integrations = set(first.integrations)
    second_integrations = set(second.integrations)
    union = first_integrations | second_integrations
    if union:
        jaccard = len(first_integrations & second_integrations) / len(union)
        similarity += jaccard * heuristics.integration_similarity_weight

    if first.complexity == second.complexity:
        similarity += heuristics.complexity_similarity_weight

    if first.source == second.source:
        similarity += heuristics.source_similarity_weight

    return similarity


def mmr_select(
    candidates: Sequence[ScoredRecommendation],
    k: int,
    heuristics: Optional[HeuristicConfig] = None,
) -> List[ScoredRecommendation]:
    """
    Select up to k diverse recommendations in selection order.

    Each step picks the candidate maximizing ``score - mmr_lambda * max
    similarity to the selection``. A distinct candidate beats a
    near-duplicate only when its score deficit is smaller than the extra
    penalty the duplicate carries, so a distinct candidate scoring well
    below the duplicates can still lose to them.

    Args:
        candidates: Scored recommendations (normally sorted by score, descending)
        k: Number of recommendations to select
        heuristics: Heuristic constants (defaults to DEFAULT_HEURISTICS)

    Returns:
        Selected recommendations; the input unchanged if it has at most k items
    """
    h = heuristics or DEFAULT_HEURISTICS
    if len(candidates) <= k:
        return list(candidates)
    if k <= 0:
        return []

    remaining = sorted(candidates, key=lambda item: item.score, reverse=True)
    selected = [remaining.pop(0)]

    while len(selected) < k and remaining:
        best_index = 0
        best_score = float("-inf")

        for index, item in enumerate(remaining):
            redundancy = max(
                solution_similarity(item.solution, chosen.solution, h)
                for chosen in selected
            )
            mmr_score = item.score - h.mmr_lambda * redundancy
            # Strict comparison keeps the higher-ranked item on ties
            if mmr_score > best_score:
                best_score = mmr_score
                best_index = index

        selected.append(remaining.pop(best_index))

    return selected
