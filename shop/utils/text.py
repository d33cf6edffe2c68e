# shop/utils/text.py
import re
from typing import Iterable, List

from shop.domain.errors import EmptyQueryError

_SEPARATORS = re.compile(r"[ \t\r\n]+")


def clean_text(text: str) -> str:
    return text.strip().lower()


def normalize(text: str) -> List[str]:
    """Dzieli tekst na slowa (spacja, tab, CR, LF) i zamienia na male litery, bez pustych tokenow."""
    return [token.lower() for token in _SEPARATORS.split(text) if token]


def contains_keyword(keywords: Iterable[str], text: str) -> bool:
    cleaned = clean_text(text)
    return any(clean_text(keyword) in cleaned for keyword in keywords)


def fuzzy_score(query: str, target: str) -> float:
    """
    Dla kazdego slowa z zapytania liczymy ile slow celu ZAWIERA je jako podciag
    ("lap" trafia w "laptop"), sumujemy i dzielimy przez liczbe slow zapytania.
    Wynik nie jest ograniczony do 1.0 - jedno slowo moze trafic w kilka slow celu.
    """
    query_tokens = normalize(query)
    if not query_tokens:
        raise EmptyQueryError()

    target_tokens = normalize(target)
    matches = sum(
        1
        for q in query_tokens
        for t in target_tokens
        if q in t
    )
    return matches / len(query_tokens)
