"""Splitters: text → list of Chunk. Base + implementations."""
from ragngine.rag.splitters.base import BaseSplitter
from ragngine.rag.splitters.character import CharacterSplitter
from ragngine.rag.splitters.recursive import RecursiveCharacterSplitter

__all__ = ["BaseSplitter", "CharacterSplitter", "RecursiveCharacterSplitter"]
