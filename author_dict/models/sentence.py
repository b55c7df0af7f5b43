"""
Sentence model: one literary quotation with its author and book
"""
from sqlalchemy import Column, Integer, Text

from author_dict.core.db import Base


class Sentence(Base):
    """
    Append-only row of the sentence store.
    Duplicate (text, author, book) tuples are allowed.
    """
    __tablename__ = "sentences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    book = Column(Text, nullable=False)
