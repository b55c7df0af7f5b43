from pydantic import BaseModel, ConfigDict


class SentenceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text: str
    author: str
    book: str
