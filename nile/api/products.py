"""
Products API Endpoints
Handles product catalog management

Author: TM3
Date: 2026-10-18
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nile.api.deps import get_product_service
from nile.api.errors import http_error, internal_error, location_for
from nile.core.exceptions import NileError
from nile.domain.product import Product, ProductCreate, ProductUpdate
from nile.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=Product)
def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product

    The owning business must exist; category_id is optional but must exist
    when given. Responds 201 with a Location header and the stored product.
    """
    try:
        product = service.create(payload)
        response.headers["Location"] = location_for(request, product.id)
        return Product.model_validate(product)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error creating product")
        raise internal_error(f"Error creating product: {str(e)}")


@router.get("", response_model=List[Product])
def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products"""
    try:
        return [Product.model_validate(product) for product in service.get_list()]

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error fetching products")
        raise internal_error(f"Error fetching products: {str(e)}")


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Get a single product by ID"""
    try:
        return Product.model_validate(service.get_by_id(product_id))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error fetching product {product_id}")
        raise internal_error(f"Error fetching product: {str(e)}")


@router.patch("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """
    Partially update a product

    Only the fields present in the body change. business_id / category_id
    are looked up again only when they are sent.
    """
    try:
        return Product.model_validate(service.update(product_id, payload))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error updating product {product_id}")
        raise internal_error(f"Error updating product: {str(e)}")


@router.delete("/{product_id}", status_code=204, response_class=Response)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Delete a product (404 if it does not exist)"""
    try:
        service.delete(product_id)
        return Response(status_code=204)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error deleting product {product_id}")
        raise internal_error(f"Error deleting product: {str(e)}")
