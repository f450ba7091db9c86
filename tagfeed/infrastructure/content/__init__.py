from tagfeed.infrastructure.content.local_store import LocalContentStore

__all__ = ["LocalContentStore"]
