from fastapi import APIRouter, UploadFile, File, Depends
from fastapi.concurrency import run_in_threadpool

from storefront.core.config import Settings
from storefront.core.deps import get_settings
from storefront.services.images import ImageStore

router = APIRouter()

def get_image_store(settings: Settings = Depends(get_settings)) -> ImageStore:
    return ImageStore(settings.UPLOAD_DIR, settings.IMAGES_BASE_URL)

@router.post("/upload")
async def upload_product_image(
    product: UploadFile = File(...),
    store: ImageStore = Depends(get_image_store)
):
    """
    Store a product image on disk.
    Returns the public URL it is served from under /images.
    """
    content = await product.read()
    filename = await run_in_threadpool(store.save, "product", product.filename, content)
    return {
        "success": 1,
        "image_url": store.public_url(filename)
    }
