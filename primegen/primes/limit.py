# primegen/primes/limit.py
import re
import unicodedata
from dataclasses import dataclass

MAXIMUM_GENERATION_LIMIT = 2**31 - 1

ERROR_BLANK = "generationLimit cannot be blank"
ERROR_NOT_INTEGER = "generationLimit must be a valid integer"
ERROR_TOO_SMALL = "generationLimit cannot be zero or less than zero"
ERROR_TOO_BIG = f"generationLimit cannot exceed {MAXIMUM_GENERATION_LIMIT}"

# \d em padrão str cobre qualquer dígito decimal Unicode (categoria Nd)
_INTEGER = re.compile(r"([+-]?)(\d+)")

# isspace() aceita estes, mas não contam como branco no limite recebido
_NOT_BLANK = frozenset("\u00a0\u2007\u202f\u0085")


@dataclass(frozen=True)
class Bound:
    value: int


@dataclass(frozen=True)
class LimitError:
    message: str


GenerationLimit = Bound | LimitError


def _is_blank(text: str) -> bool:
    return all(c.isspace() and c not in _NOT_BLANK for c in text)


def parse_limit(text: str | None) -> GenerationLimit:
    """
    Valida o limite de geração recebido como texto.
    Retorna Bound(n) quando válido, ou LimitError(mensagem) caso contrário.
    """
    if text is None or _is_blank(text):
        return LimitError(ERROR_BLANK)

    match = _INTEGER.fullmatch(text)
    if match is None:
        return LimitError(ERROR_NOT_INTEGER)

    sign, digits = match.groups()
    digits = "".join(str(unicodedata.digit(c)) for c in digits).lstrip("0") or "0"
    # acima de 10 dígitos já está fora da faixa; evita o limite de conversão de int()
    if len(digits) > len(str(MAXIMUM_GENERATION_LIMIT)):
        return LimitError(ERROR_TOO_SMALL if sign == "-" else ERROR_TOO_BIG)

    value = int(sign + digits)
    if value < 1:
        return LimitError(ERROR_TOO_SMALL)
    if value > MAXIMUM_GENERATION_LIMIT:
        return LimitError(ERROR_TOO_BIG)
    return Bound(value)
