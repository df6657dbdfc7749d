from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional


class ContentModel(BaseModel):
    # content.json keeps the camelCase keys the site reads
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HeroContent(ContentModel):
    title: str
    subtitle: str = ""
    cta_text: str = ""
    cta_link: str = ""
    background_image: str = ""


class ServiceContent(ContentModel):
    id: str
    title: str
    description: str = ""
    icon: str = ""


class TeamMemberContent(ContentModel):
    id: str
    name: str
    role: str = ""
    bio: str = ""


class GalleryItemContent(ContentModel):
    id: str
    type: Literal["image", "video"] = "image"
    src: str
    video_src: Optional[str] = None
    title: str = ""
    category: str = ""
    description: str = ""


class ContentDocument(ContentModel):
    hero: HeroContent
    services: List[ServiceContent] = []
    team: List[TeamMemberContent] = []
    clients: List[str] = []
    gallery: List[GalleryItemContent] = []
