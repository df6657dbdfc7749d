from typing import List, Optional

from app.core.collection_service import CollectionService
from app.modules.portfolio.schemas import PortfolioItemResponse


class PortfolioService(CollectionService):
    table = "portfolio_items"
    label = "Portfolio item"
    response_model = PortfolioItemResponse

    def list_items(self, category: Optional[str] = None) -> List[PortfolioItemResponse]:
        items = super().list_items()
        if category:
            items = [item for item in items if item.category == category]
        return items

    def list_categories(self) -> List[str]:
        """Distinct categories in first-seen display order."""
        seen = []
        for item in super().list_items():
            if item.category not in seen:
                seen.append(item.category)
        return seen
