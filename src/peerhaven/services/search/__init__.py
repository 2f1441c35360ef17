"""Store-backed search services."""

from peerhaven.services.search.helper_search import HelperSearchService
from peerhaven.services.search.resource_directory import ResourceDirectory

__all__ = ["HelperSearchService", "ResourceDirectory"]
