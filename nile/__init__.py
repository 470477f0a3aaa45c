"""
Nile - Backend API

Administrative backend for the Nile e-commerce platform: customers,
businesses, categories, products and payments.
"""
__version__ = "1.0.0"
