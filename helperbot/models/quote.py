"""Finnhub quote and company profile models."""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Quote(BaseModel):
    """Real-time quote as returned by the Finnhub ``/quote`` endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current_price: float = Field(default=0.0, alias="c", description="Current price")
    change: float = Field(default=0.0, alias="d", description="Absolute change")
    percent_change: float = Field(default=0.0, alias="dp", description="Percent change")
    high: float = Field(default=0.0, alias="h", description="Day high")
    low: float = Field(default=0.0, alias="l", description="Day low")
    open: float = Field(default=0.0, alias="o", description="Day open")
    previous_close: float = Field(default=0.0, alias="pc", description="Previous close")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value: object) -> object:
        # Unknown symbols come back with null change fields
        return 0.0 if value is None else value


class CompanyProfile(BaseModel):
    """Company profile from the Finnhub ``/stock/profile2`` endpoint.

    Every field is optional; unknown symbols decode to an empty profile.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(default="", description="Display name")
    market_capitalization: float = Field(
        default=0.0, alias="marketCapitalization", description="Market cap in millions"
    )
    industry: str = Field(default="", alias="finnhubIndustry", description="Industry")
    exchange: str = Field(default="", description="Listing exchange")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return 0.0 if info.field_name == "market_capitalization" else ""
        return value
