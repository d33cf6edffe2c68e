# shop/services/ranking.py
from typing import Iterable, List

from shop.domain.errors import EmptyQueryError
from shop.domain.models import Product, SearchHit
from shop.utils.text import fuzzy_score, normalize


def score_product(query: str, product: Product) -> float:
    """
    nazwa + opis + najlepszy pojedynczy tag
    pola sa sumowane (bez wag), tagi nie - jeden trafny tag nie jest rozmywany przez reszte
    """
    name_score = fuzzy_score(query, product.name)
    description_score = fuzzy_score(query, product.description)
    tag_score = max((fuzzy_score(query, tag) for tag in product.tags), default=0.0)
    return name_score + description_score + tag_score


def rank(query: str, items: Iterable[Product]) -> List[SearchHit]:
    #pusty query odrzucamy od razu, takze dla pustego katalogu
    if not normalize(query):
        raise EmptyQueryError()

    hits = [SearchHit(product=p, score=score_product(query, p)) for p in items]

    #sorted jest stabilny, remisy zostaja w kolejnosci katalogu
    return sorted(
        (h for h in hits if h.score > 0),
        key=lambda h: h.score,
        reverse=True,
    )
