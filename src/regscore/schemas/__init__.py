"""Pydantic schemas shared across pipeline stages."""

from .documents import Document
from .lexicons import Lexicon
from .scores import LexiconScore, ScoreRecord

__all__ = ["Document", "Lexicon", "LexiconScore", "ScoreRecord"]
