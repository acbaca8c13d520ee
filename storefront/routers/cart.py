from typing import Dict
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from storefront.routers.auth import get_credential_store, get_current_user_id
from storefront.services.cart import CartEngine
from storefront.services.credentials import CredentialStore

router = APIRouter()

class CartItemRequest(BaseModel):
    itemId: int = Field(ge=0)

def get_cart_engine(store: CredentialStore = Depends(get_credential_store)) -> CartEngine:
    return CartEngine(store)

@router.post("/addtocart", response_class=PlainTextResponse)
def add_to_cart(
    payload: CartItemRequest,
    user_id: str = Depends(get_current_user_id),
    engine: CartEngine = Depends(get_cart_engine)
):
    engine.increment(user_id, payload.itemId)
    return "Added"

@router.post("/removefromcart", response_class=PlainTextResponse)
def remove_from_cart(
    payload: CartItemRequest,
    user_id: str = Depends(get_current_user_id),
    engine: CartEngine = Depends(get_cart_engine)
):
    engine.decrement(user_id, payload.itemId)
    return "Removed"

@router.post("/getcart", response_model=Dict[int, int])
def get_cart(user_id: str = Depends(get_current_user_id), engine: CartEngine = Depends(get_cart_engine)):
    """Full cart mapping, item id -> quantity"""
    return engine.snapshot(user_id)
