"""
Continuation walker for paginated playlist video lists.

After the first page, YouTube serves further items through the innertube
browse endpoint, one page per continuation token. Each page may end with a
continuation marker carrying the token for the next page.
"""

from __future__ import annotations

import logging
from typing import Any

from tubelist.models.playlist import InnertubeContext, PlaylistItem
from tubelist.models.renderers import find_continuation_token
from tubelist.models.request_options import EffectiveOptions
from tubelist.services.interfaces import TransportInterface
from tubelist.services.playlist.item_parser import parse_items

logger = logging.getLogger(__name__)

BASE_API_URL = "https://www.youtube.com/youtubei/v1/browse?key="


def _continuation_items(response: Any) -> list[Any] | None:
    if not isinstance(response, dict):
        return None
    actions = response.get("onResponseReceivedActions")
    if not actions:
        return None
    return actions[0]["appendContinuationItemsAction"]["continuationItems"]


async def fetch_continuation_page(
    api_key: str,
    token: str,
    context: InnertubeContext,
    options: EffectiveOptions,
    transport: TransportInterface,
) -> list[PlaylistItem]:
    """
    Fetch every remaining page of a playlist, starting at ``token``.

    Pages are requested one after another until a page carries no
    continuation marker or ``options.remaining`` drops below 1. Each page's
    items are capped at the remaining limit, and the counter is decremented
    in place by the number of items kept.

    Parameters
    ----------
    api_key : str
        Innertube API key discovered on the playlist page.
    token : str
        Continuation token of the first page to fetch.
    context : InnertubeContext
        Request context reused verbatim for every call.
    options : EffectiveOptions
        Effective options; supplies headers and the remaining-item counter.
    transport : TransportInterface
        HTTP transport for the POST calls.

    Returns
    -------
    list[PlaylistItem]
        Items from all fetched pages, in order. A response without
        ``onResponseReceivedActions`` ends the walk.
    """
    url = BASE_API_URL + api_key
    collected: list[PlaylistItem] = []
    next_token: str | None = token
    page = 0

    while next_token:
        page += 1
        response = await transport.post_json(
            url,
            {"context": context.to_payload(), "continuation": next_token},
            headers=options.headers,
        )

        raw_items = _continuation_items(response)
        if raw_items is None:
            logger.debug("Continuation page %d has no items wrapper, stopping", page)
            break

        items = options.take(parse_items(raw_items))
        options.consume(len(items))
        collected.extend(items)
        logger.debug(
            "Continuation page %d: %d items (remaining limit %s)",
            page,
            len(items),
            options.remaining,
        )

        next_token = find_continuation_token(raw_items)
        if options.remaining < 1:
            break

    return collected
