from pydantic import BaseModel, ConfigDict


class UrlMappingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    short_id: str
    long_url: str
