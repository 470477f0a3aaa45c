"""
Categories API Endpoints
Deleting a category keeps its products and clears their category_id

Author: TM3
Date: 2026-10-18
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nile.api.deps import get_category_service
from nile.api.errors import http_error, internal_error, location_for
from nile.core.exceptions import NileError
from nile.domain.category import Category, CategoryCreate, CategoryUpdate
from nile.services.category_service import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=Category)
def create_category(
    payload: CategoryCreate,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
):
    """Create a category"""
    try:
        category = service.create(payload)
        response.headers["Location"] = location_for(request, category.id)
        return Category.model_validate(category)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error creating category")
        raise internal_error(f"Error creating category: {str(e)}")


@router.get("", response_model=List[Category])
def get_categories(service: CategoryService = Depends(get_category_service)):
    """Get all categories"""
    try:
        return [Category.model_validate(category) for category in service.get_list()]

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Error fetching categories")
        raise internal_error(f"Error fetching categories: {str(e)}")


@router.get("/{category_id}", response_model=Category)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    """Get a single category by ID"""
    try:
        return Category.model_validate(service.get_by_id(category_id))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error fetching category {category_id}")
        raise internal_error(f"Error fetching category: {str(e)}")


@router.patch("/{category_id}", response_model=Category)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    """Partially update a category"""
    try:
        return Category.model_validate(service.update(category_id, payload))

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error updating category {category_id}")
        raise internal_error(f"Error updating category: {str(e)}")


@router.delete("/{category_id}", status_code=204, response_class=Response)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    """Delete a category (404 if it does not exist)"""
    try:
        service.delete(category_id)
        return Response(status_code=204)

    except NileError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception(f"Error deleting category {category_id}")
        raise internal_error(f"Error deleting category: {str(e)}")
