from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from app.core.ordering import sort_key

UNCATEGORIZED = "Uncategorized"


@dataclass
class CategoryGroup:
    name: str
    items: List[Dict[str, Any]] = field(default_factory=list)
    category_id: Optional[str] = None


def group_by_category(
    records: Sequence[Dict[str, Any]],
    categories: Sequence[Dict[str, Any]],
    fallback: str = UNCATEGORIZED,
    include_empty: bool = False,
) -> List[CategoryGroup]:
    """Bucket records by exact ``category`` name match, in category display order.

    Records with a blank or unknown category land in a trailing ``fallback``
    bucket, which is only emitted when it has members.
    """
    groups: List[CategoryGroup] = []
    by_name: Dict[str, CategoryGroup] = {}
    for category in sorted(categories, key=sort_key):
        name = category.get("name")
        if not name or name in by_name:
            continue
        group = CategoryGroup(name=name, category_id=category.get("id"))
        by_name[name] = group
        groups.append(group)

    leftover = CategoryGroup(name=fallback)
    for record in records:
        group = by_name.get(record.get("category") or "")
        (group or leftover).items.append(record)

    result = [g for g in groups if include_empty or g.items]
    if leftover.items:
        result.append(leftover)
    return result
