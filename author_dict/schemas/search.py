from pydantic import BaseModel
from typing import List

from .dictionary import DictionaryResult
from .sentence import SentenceRead


class SearchResponse(BaseModel):
    matches: List[SentenceRead]
    dictionary: DictionaryResult
