"""
Normalized dictionary payloads.

Field names are snake_case in Python and camelCase on the wire, matching the
shape the lexical API itself uses.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Union


class Phonetic(BaseModel):
    text: str = ""
    audio: str = ""


class Definition(BaseModel):
    definition: str = ""
    example: str = ""
    synonyms: List[str] = Field(default_factory=list)
    antonyms: List[str] = Field(default_factory=list)


class Meaning(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    part_of_speech: str = Field(default="", alias="partOfSpeech")
    definitions: List[Definition] = Field(default_factory=list)


class DictionaryEntry(BaseModel):
    word: str
    phonetic: str = ""
    phonetics: List[Phonetic] = Field(default_factory=list)
    origin: str = ""
    meanings: List[Meaning] = Field(default_factory=list)


class DictionaryError(BaseModel):
    error: str


DictionaryResult = Union[DictionaryEntry, DictionaryError]
