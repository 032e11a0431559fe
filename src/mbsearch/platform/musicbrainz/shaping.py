"""Where: src/mbsearch/platform/musicbrainz/shaping.py
What: Flatten a decoded list envelope into the public search response.
Why: One routine serves every entity kind; only the entity type varies.
"""

from __future__ import annotations

from mbsearch.domain import EntityList, SearchResponse
from mbsearch.domain.results import EntityT


def flatten(wrapper: EntityList[EntityT]) -> SearchResponse[EntityT]:
    """Split scored entries into an ordered entity list and an entity->score map.

    Order is kept exactly as received. A duplicate entity stays in the list
    once per occurrence while the map keeps the last score seen.
    """

    response: SearchResponse[EntityT] = SearchResponse(count=wrapper.count, offset=wrapper.offset)
    for item in wrapper.items:
        response.entities.append(item.entity)
        response.scores[item.entity] = item.score
    return response


__all__ = ["flatten"]
