from fastapi import APIRouter

from src.login_as_customer.api.v1 import login_as_customer

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(login_as_customer.router)
