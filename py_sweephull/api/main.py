"""FastAPI application exposing the triangulation."""

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List
import structlog

from .. import __version__
from ..config import settings
from ..core.delaunator import Delaunator
from ..utils.log_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Sweephull Triangulation API",
    description="Delaunay triangulation and convex hull of planar point sets",
    version=__version__,
)


class TriangulationRequest(BaseModel):
    """Point set to triangulate."""

    coords: List[float] = Field(..., description="Flat coordinates [x0, y0, x1, y1, ...]")


class TriangulationResponse(BaseModel):
    """Triangulation in half-edge form."""

    point_count: int
    triangle_count: int
    hull: List[int] = Field(..., description="Point ids along the convex hull")
    triangles: List[int] = Field(..., description="Three point ids per triangle")
    halfedges: List[int] = Field(..., description="Opposite half-edge per slot, -1 on the hull")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Sweephull Triangulation API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/triangulate", response_model=TriangulationResponse)
def triangulate_points(request: TriangulationRequest):
    """Triangulate the posted point set."""
    point_count = len(request.coords) // 2
    if point_count > settings.max_points:
        logger.warning("Rejected oversize point set", points=point_count, limit=settings.max_points)
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_points} points are accepted, got {point_count}",
        )

    try:
        delaunator = Delaunator(request.coords)
    except ValueError as e:
        logger.warning("Rejected invalid point set", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    result = delaunator.build()

    return TriangulationResponse(
        point_count=delaunator.n,
        triangle_count=result.triangle_count,
        hull=result.hull.tolist(),
        triangles=result.triangles.tolist(),
        halfedges=result.halfedges.tolist(),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
