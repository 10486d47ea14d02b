"""
Sanitização de texto livre antes de ir para a resposta.

Usa o nh3 (bindings do ammonia): elementos <script> e <style> somem junto com o
conteúdo, atributos fora da whitelist (onerror, onclick, style...) são
descartados e o que sobra de < e > solto vira entidade. Texto sem nenhum '<'
não tem markup e volta como está (um '&' solto não é escapado).
"""
from typing import Optional

import nh3

ALLOWED_TAGS = {
    "a", "b", "br", "code", "em", "i", "img", "li",
    "ol", "p", "pre", "strong", "u", "ul",
}

ALLOWED_ATTRIBUTES = {
    "a": {"href", "title"},
    "img": {"src", "alt", "title", "width", "height"},
}

URL_SCHEMES = {"http", "https", "mailto"}


def sanitize_text(value: Optional[str]) -> Optional[str]:
    if value is None or "<" not in value:
        return value
    return nh3.clean(
        value,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        url_schemes=URL_SCHEMES,
    )
