"""Promo code registry"""

from decimal import Decimal

from ..models.promo import PromoCode

PROMO_CODES: tuple[PromoCode, ...] = (
    PromoCode(code="GREEN10", discount_value=Decimal("10"), is_percentage=True),
    PromoCode(code="SAVE20", discount_value=Decimal("20"), is_percentage=True),
    PromoCode(code="FLAT15", discount_value=Decimal("15"), is_percentage=False),
)


class PromoDatabase:
    """In-memory promo code registry"""

    def __init__(self, codes: tuple[PromoCode, ...] = PROMO_CODES):
        self.codes = tuple(codes)

    def list_codes(self) -> tuple[PromoCode, ...]:
        return self.codes


# Singleton instance
promo_db = PromoDatabase()
