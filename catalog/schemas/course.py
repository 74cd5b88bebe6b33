from pydantic import BaseModel, ConfigDict, field_validator


class CourseInput(BaseModel):
    title: str
    description: str

    @field_validator('title', 'description', mode='before')
    @classmethod
    def require_text(cls, value):
        normalized = value.strip() if isinstance(value, str) else ''
        if not normalized:
            raise ValueError('Please provide a title and description.')
        return normalized


class CourseResponse(BaseModel):
    id: int
    title: str
    description: str
    instructor_id: int
    instructor_name: str | None = None

    model_config = ConfigDict(from_attributes=True)
