from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from pydantic import BaseModel

from storefront.db.session import get_session
from storefront.models.product import Product
from storefront.services.catalog import CatalogService

router = APIRouter()

class ProductCreate(BaseModel):
    name: str
    image: str
    category: str
    new_price: float
    old_price: float
    available: bool = True

class ProductRemove(BaseModel):
    id: int
    name: Optional[str] = None

class ProductAck(BaseModel):
    success: bool
    name: Optional[str] = None

def get_catalog_service(session: Session = Depends(get_session)) -> CatalogService:
    return CatalogService(session)

@router.get("/allproducts", response_model=List[Product])
def all_products(service: CatalogService = Depends(get_catalog_service)):
    return service.list_products()

@router.post("/addproduct", response_model=ProductAck)
def add_product(product: ProductCreate, service: CatalogService = Depends(get_catalog_service)):
    service.add(**product.model_dump())
    return {"success": True, "name": product.name}

@router.post("/removeproduct", response_model=ProductAck)
def remove_product(payload: ProductRemove, service: CatalogService = Depends(get_catalog_service)):
    # Echoes the name the client sent; absent ids are not an error
    service.remove(payload.id)
    return {"success": True, "name": payload.name}

@router.get("/newcollections", response_model=List[Product])
def new_collections(service: CatalogService = Depends(get_catalog_service)):
    """Latest 8 products, skipping the first one ever added"""
    return service.new_collections(limit=8)

@router.get("/popularinwomen", response_model=List[Product])
def popular_in_women(service: CatalogService = Depends(get_catalog_service)):
    return service.popular_in("women", limit=4)
