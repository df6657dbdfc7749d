from typing import List, Optional

from app.core.collection_service import CollectionService
from app.modules.gallery.schemas import GalleryItemResponse


class GalleryService(CollectionService):
    table = "gallery_items"
    label = "Gallery item"
    response_model = GalleryItemResponse

    def list_items(self, category: Optional[str] = None) -> List[GalleryItemResponse]:
        items = super().list_items()
        if category:
            items = [item for item in items if item.category == category]
        return items
