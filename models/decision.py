"""
The per-period business decision: price, advertising spend and production.
"""

from pydantic import BaseModel, ConfigDict, Field

from utils.numeric import clamp as _clamp


class Decision(BaseModel):
    """Price, ad spend and production quantity chosen for one period."""

    model_config = ConfigDict(frozen=True)

    price: float = Field(..., ge=0)
    ad_spend: float = Field(..., ge=0)
    production: int = Field(..., ge=0)

    @classmethod
    def from_override(cls, price: float, ad_spend: float, production: int, bounds) -> "Decision":
        """Build a decision from raw player input, saturating each field into ``bounds``."""
        return cls(
            price=_clamp(float(price), *bounds.price),
            ad_spend=_clamp(float(ad_spend), *bounds.ad_spend),
            production=int(_clamp(int(production), *bounds.production)),
        )

    def clamped(self, bounds) -> "Decision":
        """Return a copy saturated into ``bounds`` (an OverrideBounds)."""
        return Decision.from_override(self.price, self.ad_spend, self.production, bounds)

    def __str__(self) -> str:
        return f"Price: ${self.price:.2f} | Ad: ${self.ad_spend:.2f} | Produce: {self.production} units"
