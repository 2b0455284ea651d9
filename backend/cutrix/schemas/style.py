from pydantic import BaseModel, Field


class StyleCreate(BaseModel):
    style_number: str = Field(..., min_length=1, max_length=100)


class StyleResponse(BaseModel):
    id: int
    style_number: str

    class Config:
        from_attributes = True
