from tagfeed.infrastructure.search.solr_client import SolrSearchEngine

__all__ = ["SolrSearchEngine"]
