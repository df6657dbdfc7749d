from app.core.collection_service import CollectionService
from app.modules.clients.schemas import ClientResponse


class ClientService(CollectionService):
    table = "clients"
    label = "Client"
    response_model = ClientResponse
