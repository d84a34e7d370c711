from typing import List, Tuple

from typing_extensions import final

from pricingdb.commons.database.model import DBEntity


@final
class PaymentMethod(DBEntity):
    """
    A way a customer can pay, and the charge applied when they use it
    """

    id: int
    description: str
    charge: float


# (description, charge) of the reference payment methods
PAYMENT_METHOD_SEEDS: List[Tuple[str, float]] = [
    ("Cash", 0.0),
    ("Cheque", 2.5),
    ("Card", 1.5),
]
