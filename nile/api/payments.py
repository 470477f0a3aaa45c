"""
Payments API Endpoints
Payments belong to an existing customer; transaction_id is unique

Author: TM3
Date: 2026-10-18
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nile.api.deps import get_payment_service
from nile.api.errors import http_error, internal_error, location_for
from nile.core.exceptions import NileError
from nile.domain.payment import Payment, PaymentCreate, PaymentUpdate
from nile.services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=Payment)
def create_payment(
    payload: PaymentCreate,
    request: Request,
    response: Response,
    service: PaymentService = Depends(get_payment_service),
):
    """
    Register a payment

    customer_id (customerId / costumerId also accepted) must exist and
    transaction_id must be unused (500 with code CONFLICT otherwise).
    """
    try:
        payment = service.create(payload)
        response.headers["Location"] = location_for(request, payment.id)
        return Payment.model_validate(payment)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error creating payment")
        raise internal_error(f"Error creating payment: {str(e)}")


@router.get("", response_model=List[Payment])
def get_payments(service: PaymentService = Depends(get_payment_service)):
    """Get all payments"""
    try:
        return [Payment.model_validate(payment) for payment in service.get_list()]

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error fetching payments")
        raise internal_error(f"Error fetching payments: {str(e)}")


@router.get("/{payment_id}", response_model=Payment)
def get_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    """Get a single payment by ID"""
    try:
        return Payment.model_validate(service.get_by_id(payment_id))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error fetching payment {payment_id}")
        raise internal_error(f"Error fetching payment: {str(e)}")


@router.patch("/{payment_id}", response_model=Payment)
def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    """
    Partially update a payment

    customer_id is looked up again only when it is sent.
    """
    try:
        return Payment.model_validate(service.update(payment_id, payload))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error updating payment {payment_id}")
        raise internal_error(f"Error updating payment: {str(e)}")


@router.delete("/{payment_id}", status_code=204, response_class=Response)
def delete_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    """Delete a payment (404 if it does not exist)"""
    try:
        service.delete(payment_id)
        return Response(status_code=204)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error deleting payment {payment_id}")
        raise internal_error(f"Error deleting payment: {str(e)}")
