"""
Businesses API Endpoints
Sellers that own products; deleting a business deletes its products
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nile.api.deps import get_business_service
from nile.api.errors import http_error, internal_error, location_for
from nile.core.exceptions import NileError
from nile.domain.business import Business, BusinessCreate, BusinessUpdate
from nile.services.business_service import BusinessService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=Business)
def create_business(
    payload: BusinessCreate,
    request: Request,
    response: Response,
    service: BusinessService = Depends(get_business_service),
):
    """Create a business"""
    try:
        business = service.create(payload)
        response.headers["Location"] = location_for(request, business.id)
        return Business.model_validate(business)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error creating business")
        raise internal_error(f"Error creating business: {str(e)}")


@router.get("", response_model=List[Business])
def get_businesses(service: BusinessService = Depends(get_business_service)):
    """Get all businesses"""
    try:
        return [Business.model_validate(business) for business in service.get_list()]

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error fetching businesses")
        raise internal_error(f"Error fetching businesses: {str(e)}")


@router.get("/{business_id}", response_model=Business)
def get_business(business_id: int, service: BusinessService = Depends(get_business_service)):
    """Get a single business by ID"""
    try:
        return Business.model_validate(service.get_by_id(business_id))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error fetching business {business_id}")
        raise internal_error(f"Error fetching business: {str(e)}")


@router.patch("/{business_id}", response_model=Business)
def update_business(
    business_id: int,
    payload: BusinessUpdate,
    service: BusinessService = Depends(get_business_service),
):
    """Partially update a business"""
    try:
        return Business.model_validate(service.update(business_id, payload))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error updating business {business_id}")
        raise internal_error(f"Error updating business: {str(e)}")


@router.delete("/{business_id}", status_code=204, response_class=Response)
def delete_business(business_id: int, service: BusinessService = Depends(get_business_service)):
    """Delete a business and its products"""
    try:
        service.delete(business_id)
        return Response(status_code=204)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error deleting business {business_id}")
        raise internal_error(f"Error deleting business: {str(e)}")
