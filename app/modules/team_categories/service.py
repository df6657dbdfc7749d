from app.core.collection_service import CollectionService
from app.modules.team_categories.schemas import TeamCategoryResponse


class TeamCategoryService(CollectionService):
    table = "team_categories"
    label = "Team category"
    response_model = TeamCategoryResponse
