from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from config import config
from models.runtime import RuntimeRequest, RuntimeResponse
from models.images import ImageSearchRequest, RandomImageRequest, ImageSearchResponse, RandomImageResponse
from services import runtime
from services.runtime import InvalidInputError
from services.images import ImageSearchError, UnsplashClient, search_images
from services.cache import CacheClient
from api.depends import CLIENT_AUTH, CACHE_CLIENT, IMAGE_CLIENT

import logging

logger = logging.getLogger(__name__)

tool_router = APIRouter(
    prefix="/tools",
    tags=["tools"],
    dependencies=[CLIENT_AUTH], # every tool call goes through the bearer check
)


# POST /tools/calculate_experiment_runtime
@tool_router.post("/calculate_experiment_runtime", response_model=RuntimeResponse)
def calculate_experiment_runtime_route(request: RuntimeRequest):
    """Estimate how many days an A/B test needs to reach its required sample size."""
    design = request.to_design(default_power=config.default_power)

    try:
        result = runtime.estimate_runtime(design)
    except InvalidInputError as e:
        field = RuntimeRequest.wire_name(e.field)
        logger.info("calculate_experiment_runtime invalid %s: %s", field, e.message)
        return JSONResponse(
            content={"status": "failed", "error": e.message, "field": field},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    if not result.estimable:
        return JSONResponse(
            content={
                "status": "failed",
                "error": f"Experiment design cannot be estimated: {result.reason}.",
                "days": None,
                "estimable": False,
            },
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    logger.info("calculate_experiment_runtime: %d days (n=%.1f per variation)", result.days, result.sample_per_variation)
    return RuntimeResponse(
        days=result.days,
        estimable=True,
        sample_per_variation=result.sample_per_variation,
        total_sample=result.total_sample,
    )


def _image_error(e: ImageSearchError) -> JSONResponse:
    return JSONResponse(content={"status": "failed", "error": e.message}, status_code=e.status_code)


# POST /tools/get_images
@tool_router.post("/get_images", response_model=ImageSearchResponse)
def get_images_route(
    request: ImageSearchRequest,
    client: UnsplashClient = IMAGE_CLIENT,
    cache: CacheClient = CACHE_CLIENT
):
    """Search Unsplash for landscape images."""
    try:
        images = search_images(client, cache, request.query, request.per_page)
    except ImageSearchError as e:
        logger.warning("get_images '%s' failed: %s", request.query, e.message)
        return _image_error(e)
    return ImageSearchResponse(images=images)


# POST /tools/get_random_images
@tool_router.post("/get_random_images", response_model=RandomImageResponse)
def get_random_images_route(
    request: RandomImageRequest,
    client: UnsplashClient = IMAGE_CLIENT
):
    """Random landscape images for a topic."""
    try:
        images = client.random(request.query, request.count)
    except ImageSearchError as e:
        logger.warning("get_random_images '%s' failed: %s", request.query, e.message)
        return _image_error(e)
    return RandomImageResponse(images=images)
