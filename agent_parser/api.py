# agent_parser/api.py

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError
from typing import Optional
from agent_parser.aggregator import facet_counter, summarize
from agent_parser.classifier import parse
from agent_parser.config import settings
from agent_parser.schemas import FacetSummary, ParseBatchResponse, ParsedAgent, ParseRequest
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/parse", response_model=ParseBatchResponse)
async def parse_batch(request: Request) -> ParseBatchResponse:
    """
    Classify User-Agent strings.
    Accepts a single item or an array of items.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected unreadable request body: {e}")
        return ParseBatchResponse(status="error", processed=0, errors=1)

    # Normalize to list
    if isinstance(body, dict):
        items = [body]
    elif isinstance(body, list):
        items = body
    else:
        return ParseBatchResponse(status="error", processed=0, errors=1)

    if len(items) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(items)} items exceeds limit of {settings.max_batch_size}",
        )

    results = []
    errors = 0

    for item in items:
        try:
            parse_request = ParseRequest(**item)
        except (TypeError, ValidationError) as e:
            errors += 1
            logger.warning(f"Failed to read parse item: {e}")
            continue

        agent = parse(parse_request.user_agent)
        facet_counter.add(agent)
        results.append(agent)

    if errors == 0:
        status = "ok"
    elif results:
        status = "partial"
    else:
        status = "error"

    return ParseBatchResponse(
        status=status,
        processed=len(results),
        errors=errors,
        results=results,
        summary=summarize(results),
    )


@router.get("/api/parse", response_model=ParsedAgent)
async def parse_single(request: Request, ua: Optional[str] = None) -> ParsedAgent:
    """Classify `ua`, or the caller's own User-Agent header when it is absent"""
    if ua is None:
        ua = request.headers.get("user-agent", "")

    agent = parse(ua)
    facet_counter.add(agent)
    return agent


@router.get("/stats/facets", response_model=FacetSummary)
async def facet_stats() -> FacetSummary:
    """Counts of everything classified since startup or the last reset"""
    return facet_counter.snapshot()


@router.delete("/stats/facets", response_model=FacetSummary)
async def reset_facet_stats() -> FacetSummary:
    return facet_counter.get_and_reset()


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
