"""Price offers on phones and costs."""

from __future__ import annotations

from dataclasses import dataclass, field


def percent_of(percent, value):
    """Return ``percent`` percent of ``value``."""
    return float(value) * float(percent) / 100


@dataclass
class Mobile:
    """A phone model line with its price."""

    brand: str = ""
    models: list = field(default_factory=list)
    year: int = 0
    price: int = 0

    def moto_offer(self):
        """Cut 200 off the price of a moto phone, in place, and return the price."""
        if self.brand == "moto":
            self.price -= 200
        return self.price

    def oppo_offer(self):
        """Return the oppo price with 20% off per "reno" model; the phone is unchanged."""
        price = self.price
        if self.brand == "oppo":
            for model in self.models:
                if model == "reno":
                    price -= int(percent_of(20, price))
        return price


@dataclass
class Cost:
    """A pair of prices."""

    x: float = 0.0
    y: float = 0.0

    def festival_offer(self, percent):
        """Take ``percent`` percent off both prices, in place, and return them."""
        self.x -= percent_of(percent, self.x)
        self.y -= percent_of(percent, self.y)
        return self.x, self.y

    def add_discount(self, amount):
        """Return both prices less ``amount``, leaving the cost unchanged."""
        return self.x - amount, self.y - amount