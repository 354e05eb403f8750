"""Contexto explícito por requisição (autorização e tenant).

Passado por parâmetro na cadeia de chamadas, sem lookup por chave em contexto.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

AUTHORIZATION_HEADER = "Authorization"
COMPANY_NID_HEADER = "X-Company-Nid"


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Valores do chamador associados a uma requisição.

    Attributes:
        authorization: Valor bruto do header Authorization (nunca logar)
        company_nid: ID do tenant informado pelo chamador (string crua)
    """

    authorization: str = ""
    company_nid: str = ""

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RequestContext:
        """Monta contexto a partir de headers (nomes case-insensitive)."""
        lowered = {key.lower(): value for key, value in headers.items()}
        return cls(
            authorization=lowered.get(AUTHORIZATION_HEADER.lower(), "").strip(),
            company_nid=lowered.get(COMPANY_NID_HEADER.lower(), "").strip(),
        )

    def company_nid_override(self) -> int | None:
        """Retorna company_nid como inteiro positivo, ou None."""
        try:
            value = int(self.company_nid)
        except ValueError:
            return None
        return value if value > 0 else None
