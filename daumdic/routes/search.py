"""Dictionary search routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from daumdic.errors import EmptyWordError, FetchError, ParsingFailedError
from daumdic.service import DictionaryService, get_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get("")
async def search(
    q: str = Query("", description="Term to look up"),
    service: DictionaryService = Depends(get_service),
) -> dict[str, Any]:
    """Search Daum dictionary and return words and alternatives as JSON."""
    try:
        result = await service.search_async(q)
    except EmptyWordError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    except FetchError as e:
        logger.warning(f"Search for '{q}' failed: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from None
    except ParsingFailedError as e:
        logger.error(f"Could not parse result page for '{q}': {e}")
        raise HTTPException(status_code=502, detail=str(e)) from None

    return result.to_dict()
