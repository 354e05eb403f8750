"""Base dos payloads de callback (modelos pydantic com aliases de wire)."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class CallbackPayload(BaseModel):
    """Payload serializado com os nomes de campo do contrato externo.

    Campos listados em `omit_when_empty` (nome ou alias) saem do JSON
    quando vazios/falsos.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    omit_when_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key not in self.omit_when_empty or value
        }

    def to_json(self) -> bytes:
        """Serializa para JSON com aliases do contrato."""
        return self.model_dump_json(by_alias=True).encode("utf-8")
