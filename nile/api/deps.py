"""
FastAPI dependencies: one service instance per request, bound to the
request's database session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from nile.core.database import get_db
from nile.services import (
    BusinessService,
    CategoryService,
    CustomerService,
    PaymentService,
    ProductService,
)


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def get_business_service(db: Session = Depends(get_db)) -> BusinessService:
    return BusinessService(db)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)
