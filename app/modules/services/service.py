from app.core.collection_service import CollectionService
from app.modules.services.schemas import ServiceResponse


class ServiceCatalogService(CollectionService):
    table = "services"
    label = "Service"
    response_model = ServiceResponse
