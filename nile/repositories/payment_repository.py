"""
Payment Repository - Data Access Layer for Payments
"""
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from nile.models import Payment
from nile.repositories.base import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    model = Payment
    resource_name = "Payment"

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Payment]:
        """
        Find payment by its (unique) transaction id

        Returns:
            Payment or None if not found
        """
        try:
            return self.db.query(Payment).filter(Payment.transaction_id == transaction_id).first()
        except SQLAlchemyError as e:
            raise self._translate(e, "reading")
