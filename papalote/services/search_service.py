"""
Search Service - typo-tolerant product search

Scoring per field (0..1, see fuzzy_match) is weighted and summed:

    name x3, category x2, maker x1.5, state x1.5, description x0.5,
    first matching material x1, first matching tag x1

The sum is divided by 10, then boosted x1.1 for verified products,
x1.1 for featured products and x1.05 for products in stock.
"""
import re
from typing import List

from papalote.domain.product import Product, SearchResult


DEFAULT_LIMIT = 10
DEFAULT_MIN_SCORE = 0.2
SUGGESTION_LIMIT = 5

FIELD_WEIGHTS = (
    ("name", 3),
    ("category", 2),
    ("maker", 1.5),
    ("state", 1.5),
    ("description", 0.5),
)


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance (insertions, deletions, substitutions)"""
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current

    return previous[-1]


def fuzzy_match(text: str, query: str) -> float:
    """
    Score how well text matches query (0 = no match, 1 = exact)

    - exact match: 1
    - substring: 0.8 plus up to 0.1 the earlier it appears
    - every query word starts a word in text: 0.7
    - Levenshtein similarity for queries of 3 to 15 characters:
      whole text above 0.4 -> similarity * 0.5,
      otherwise any word (3+ chars) above 0.6 -> similarity * 0.4
    """
    text_lower = text.lower()
    query_lower = query.lower()

    if text_lower == query_lower:
        return 1.0

    position = text_lower.find(query_lower)
    if position != -1:
        position_bonus = max(0.0, 1 - position / len(text_lower))
        return 0.8 + position_bonus * 0.1

    words = re.split(r"\s+", text_lower)
    query_words = re.split(r"\s+", query_lower)
    if all(any(word.startswith(qw) for word in words) for qw in query_words):
        return 0.7

    if 3 <= len(query_lower) <= 15:
        distance = levenshtein_distance(text_lower, query_lower)
        similarity = 1 - distance / max(len(text_lower), len(query_lower))
        if similarity > 0.4:
            return similarity * 0.5

        for word in words:
            if len(word) >= 3:
                word_distance = levenshtein_distance(word, query_lower)
                word_similarity = 1 - word_distance / max(len(word), len(query_lower))
                if word_similarity > 0.6:
                    return word_similarity * 0.4

    return 0.0


class SearchService:
    """
    Service for fuzzy product search and autocomplete

    Usage:
        results = SearchService.search(products, "alebrije")
    """

    @staticmethod
    def score_product(product: Product, query: str) -> SearchResult:
        total = 0.0
        matched_fields: List[str] = []

        for field, weight in FIELD_WEIGHTS:
            score = fuzzy_match(getattr(product, field) or "", query)
            if score > 0:
                total += score * weight
                matched_fields.append(field)

        for list_field in ("materials", "tags"):
            for value in getattr(product, list_field):
                score = fuzzy_match(value, query)
                if score > 0:
                    total += score
                    matched_fields.append(list_field)
                    break

        final_score = total / 10
        if product.verified:
            final_score *= 1.1
        if product.featured:
            final_score *= 1.1
        if product.in_stock:
            final_score *= 1.05

        return SearchResult(product=product, score=final_score, matched_fields=matched_fields)

    @classmethod
    def search(
        cls,
        products: List[Product],
        query: str,
        limit: int = DEFAULT_LIMIT,
        min_score: float = DEFAULT_MIN_SCORE,
    ) -> List[SearchResult]:
        """
        Search products, best match first

        Args:
            products: Products to search
            query: Free text; blank queries return no results
            limit: Maximum results
            min_score: Results scoring below this are dropped

        Returns:
            List of SearchResult sorted by score descending
        """
        normalized = query.strip().lower()
        if not normalized:
            return []

        results = []
        for product in products:
            result = cls.score_product(product, normalized)
            if result.score >= min_score and result.matched_fields:
                results.append(result)

        results.sort(key=lambda r: r.score, reverse=True)
        return results[:limit]

    @staticmethod
    def suggestions(products: List[Product], query: str, limit: int = SUGGESTION_LIMIT) -> List[str]:
        """
        Autocomplete terms (names, categories, makers, states, materials)

        Terms starting with the query come first, then shorter terms,
        then alphabetical order. Queries under 2 characters get nothing.
        """
        if not query.strip() or len(query) < 2:
            return []

        query_lower = query.lower()
        found: List[str] = []

        def collect(term: str) -> None:
            if query_lower in term.lower() and term not in found:
                found.append(term)

        for product in products:
            collect(product.name)
            collect(product.category)
            collect(product.maker)
            collect(product.state)
            for material in product.materials:
                collect(material)

            if len(found) >= limit * 2:
                break

        found.sort(key=lambda term: (not term.lower().startswith(query_lower), len(term), term))
        return found[:limit]
