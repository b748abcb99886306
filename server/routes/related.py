"""Related content endpoints: discovery, visualization, batch, pairwise similarity, network stats."""

import logging
from typing import Awaitable, List, Optional, TypeVar

from fastapi import APIRouter, HTTPException, Query

from relations import NotFoundError, StoreUnavailableError, ValidationError

from ..models import ApiResponse, BatchProcessRequest, UpdateRelatedRequest
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


async def _run(call: Awaitable[T]) -> T:
    """Await an engine call, mapping engine errors to HTTP status codes."""
    try:
        return await call
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreUnavailableError as e:
        logger.error("[related] STORE_UNAVAILABLE error=%s", e)
        raise HTTPException(status_code=503, detail=str(e))


# Fixed paths are declared before /{content_id} so they are not captured by it.


@router.get("/network-stats", response_model=ApiResponse)
async def network_stats(
    content_ids: Optional[List[str]] = Query(default=None),
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
):
    """Aggregate graph metrics over several roots (catalog sample when no ids are given)."""
    engine = get_state().engine
    stats = await _run(engine.network_stats(content_ids, max_depth=max_depth, max_nodes=max_nodes))
    return ApiResponse(data=stats.model_dump(mode="json"))


@router.get("/similarity/{content_id_1}/{content_id_2}", response_model=ApiResponse)
async def similarity(content_id_1: str, content_id_2: str):
    engine = get_state().engine
    breakdown = await _run(engine.compare(content_id_1, content_id_2))
    return ApiResponse(data=breakdown.model_dump(mode="json"))


@router.post("/batch-process", response_model=ApiResponse)
async def batch_process(request: BatchProcessRequest):
    engine = get_state().engine
    result = await _run(
        engine.batch_process(
            request.content_ids,
            batch_size=request.batch_size,
            threshold=request.threshold,
            update_metadata=request.update_metadata,
            limit=request.limit,
        )
    )
    return ApiResponse(data=result.model_dump(mode="json"))


@router.get("/{content_id}", response_model=ApiResponse)
async def get_related(
    content_id: str,
    threshold: Optional[float] = None,
    limit: Optional[int] = None,
    include_metadata: bool = True,
):
    engine = get_state().engine
    related = await _run(
        engine.find_related(
            content_id, threshold=threshold, limit=limit, include_metadata=include_metadata
        )
    )
    return ApiResponse(data=[r.model_dump(mode="json") for r in related])


@router.get("/{content_id}/visualization", response_model=ApiResponse)
async def get_visualization(
    content_id: str,
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
    include_metrics: bool = True,
):
    engine = get_state().engine
    graph = await _run(
        engine.build_graph(
            content_id, max_depth=max_depth, max_nodes=max_nodes, include_metrics=include_metrics
        )
    )
    return ApiResponse(data=graph.model_dump(mode="json"))


@router.post("/{content_id}/update", response_model=ApiResponse)
async def update_related(content_id: str, request: Optional[UpdateRelatedRequest] = None):
    """Recompute related links for one item and persist them to its metadata record."""
    request = request or UpdateRelatedRequest()
    engine = get_state().engine
    written = await _run(
        engine.update_related_metadata(content_id, threshold=request.threshold, limit=request.limit)
    )
    return ApiResponse(data={"content_id": content_id, "links_written": written})
