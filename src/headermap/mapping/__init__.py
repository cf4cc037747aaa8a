"""CSV header mapping.

Requests a header-to-field assignment from the LLM, reconciles it into a
MappingResult, and ties both steps together in ``map_headers``.
"""

from headermap.mapping.pipeline import map_headers
from headermap.mapping.reconciler import reconcile
from headermap.mapping.requester import MappingRequester

__all__ = ["MappingRequester", "map_headers", "reconcile"]
