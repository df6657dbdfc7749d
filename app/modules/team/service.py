from typing import List

from app.core.collection_service import CollectionService
from app.core.grouping import group_by_category
from app.core.ordering import OrderedCollection
from app.modules.team.schemas import TeamMemberResponse, TeamGroupResponse


class TeamService(CollectionService):
    table = "team_members"
    label = "Team member"
    response_model = TeamMemberResponse

    def list_grouped(self, include_empty: bool = False) -> List[TeamGroupResponse]:
        """Members bucketed by category, in category display order."""
        members = self.collection.list()
        categories = OrderedCollection(self.supabase, "team_categories").list()
        return [
            TeamGroupResponse(
                name=group.name,
                category_id=group.category_id,
                members=[self._to_response(row) for row in group.items],
            )
            for group in group_by_category(members, categories, include_empty=include_empty)
        ]
