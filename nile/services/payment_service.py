"""
Payment Service
Registers payments against existing customers

Author: TM3
Date: 2026-10-18
"""
import logging

from sqlalchemy.orm import Session

from nile.core.database import transactional
from nile.core.exceptions import ConflictError
from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, is_present, required_value
from nile.domain.payment import PaymentCreate, PaymentUpdate, merge_payment
from nile.models import Payment
from nile.repositories.customer_repository import CustomerRepository
from nile.repositories.payment_repository import PaymentRepository
from nile.services.base import BaseService

logger = logging.getLogger(__name__)


class PaymentService(BaseService[Payment]):
    """
    Service for payments

    transaction_id is unique across payments; a duplicate is reported as a
    ConflictError instead of surfacing the database constraint.
    """

    repository_class = PaymentRepository

    def __init__(self, db: Session, merge_options: MergeOptions = DEFAULT_MERGE_OPTIONS):
        super().__init__(db, merge_options)
        self.customer_repository = CustomerRepository(db)

    def create(self, payload: PaymentCreate) -> Payment:
        """
        Register a payment

        Raises:
            ReferenceNotFoundError: If the customer does not exist
            ConflictError: If transaction_id is already used
        """
        with transactional(self.db):
            customer = self.customer_repository.get_reference(payload.customer_id)
            self._ensure_transaction_id_free(payload.transaction_id)

            payment = Payment(
                transaction_id=payload.transaction_id,
                amount=payload.amount,
                payment_method=payload.payment_method,
                payment_status=payload.payment_status,
                payment_date=payload.payment_date,
                customer=customer,
            )
            payment = self.repository.save(payment)

        logger.info(
            f"Created payment {payment.id} ({payment.transaction_id}) for customer {customer.id}",
            extra={"extra": {"payment_status": payment.payment_status.value}},
        )
        return payment

    def update(self, payment_id: int, payload: PaymentUpdate) -> Payment:
        """
        Apply a partial update to a payment

        Raises:
            NotFoundError: If the payment does not exist
            ReferenceNotFoundError: If a sent customer_id does not exist
            ConflictError: If a sent transaction_id belongs to another payment
            InvalidPayloadError: If a NOT NULL field is sent as null with ignore_none=False
        """
        with transactional(self.db):
            payment = self.repository.get_by_id(payment_id)

            if is_present(payload, "customer_id", self.merge_options):
                customer_id = required_value(payload, "customer_id")
                payment.customer = self.customer_repository.get_reference(customer_id)
            if is_present(payload, "transaction_id", self.merge_options):
                transaction_id = required_value(payload, "transaction_id")
                self._ensure_transaction_id_free(transaction_id, current_id=payment.id)

            merge_payment(payment, payload, self.merge_options)
            payment = self.repository.save(payment)

        logger.info(f"Updated payment {payment_id}")
        return payment

    def _ensure_transaction_id_free(self, transaction_id: str, current_id: int = None) -> None:
        existing = self.repository.find_by_transaction_id(transaction_id)
        if existing is not None and existing.id != current_id:
            raise ConflictError(f"Payment with transaction_id '{transaction_id}' already exists")
