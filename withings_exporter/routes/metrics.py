from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ..metrics import CONTENT_TYPE_LATEST, WeightMetrics

router: APIRouter = APIRouter(tags=["monitoring"])


def get_weight_metrics(request: Request) -> WeightMetrics:
    return request.app.state.weight_metrics


@router.get("/metrics", include_in_schema=False)
async def metrics(
    weight_metrics: WeightMetrics = Depends(get_weight_metrics),
) -> Response:
    """Expose the weight gauge in Prometheus text exposition format."""
    return Response(content=weight_metrics.render(), media_type=CONTENT_TYPE_LATEST)
