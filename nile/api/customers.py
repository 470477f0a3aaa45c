"""
Customers API Endpoints
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nile.api.deps import get_customer_service
from nile.api.errors import http_error, internal_error, location_for
from nile.core.exceptions import NileError
from nile.domain.customer import Customer, CustomerCreate, CustomerUpdate
from nile.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=Customer)
def create_customer(
    payload: CustomerCreate,
    request: Request,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
):
    """Create a customer; responds 201 with Location and the stored customer"""
    try:
        customer = service.create(payload)
        response.headers["Location"] = location_for(request, customer.id)
        return Customer.model_validate(customer)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error creating customer")
        raise internal_error(f"Error creating customer: {str(e)}")


@router.get("", response_model=List[Customer])
def get_customers(service: CustomerService = Depends(get_customer_service)):
    """Get all customers"""
    try:
        return [Customer.model_validate(customer) for customer in service.get_list()]

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error fetching customers")
        raise internal_error(f"Error fetching customers: {str(e)}")


@router.get("/{customer_id}", response_model=Customer)
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """Get a single customer by ID"""
    try:
        return Customer.model_validate(service.get_by_id(customer_id))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error fetching customer {customer_id}")
        raise internal_error(f"Error fetching customer: {str(e)}")


@router.patch("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    """Partially update a customer (absent fields are left unchanged)"""
    try:
        return Customer.model_validate(service.update(customer_id, payload))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error updating customer {customer_id}")
        raise internal_error(f"Error updating customer: {str(e)}")


@router.delete("/{customer_id}", status_code=204, response_class=Response)
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """Delete a customer and its payments"""
    try:
        service.delete(customer_id)
        return Response(status_code=204)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error deleting customer {customer_id}")
        raise internal_error(f"Error deleting customer: {str(e)}")
