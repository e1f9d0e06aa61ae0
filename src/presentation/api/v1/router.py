from fastapi import APIRouter

from .customer import customer_router
from .card import card_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(customer_router, tags=["Customers"])
router.include_router(card_router, tags=["Cards"])
