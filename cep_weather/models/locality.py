"""Pydantic models for ViaCEP locality data."""

from pydantic import BaseModel, Field


class ViaCEPResponse(BaseModel):
    """Raw ViaCEP API response model (only the consumed fields).

    ViaCEP signals an unknown CEP with ``{"erro": true}`` (or ``"true"`` as a
    string in newer responses); lax bool parsing accepts both.
    """

    localidade: str | None = None
    uf: str | None = None
    erro: bool = False


class Locality(BaseModel):
    """City-level record resolved from a CEP."""

    city: str = Field(min_length=1)
    state: str | None = Field(default=None, pattern=r"^[A-Za-z]{2}$")
