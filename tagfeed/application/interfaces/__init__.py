"""Application ports implemented by the infrastructure layer."""

from tagfeed.application.interfaces.repositories import IContentStore
from tagfeed.application.interfaces.services import ISearchEngine

__all__ = ["IContentStore", "ISearchEngine"]
