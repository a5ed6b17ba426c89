"""
Posts API Lambda entry point.

Local dev:
    PYTHONPATH=src ENV=local uvicorn posts_api.handler:app --reload --port 8001

Lambda handler:
    posts_api.handler.handler
"""

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from posts_api.routes import posts
from shared.config import get_settings
from shared.cors import cors_headers
from shared.errors import ApiError, NotFoundError
from shared.log import bind_request, get_logger
from shared.request import normalize, request_id

logger = get_logger(component="handler")

app = FastAPI(
    title="Posts API",
    description="Public blog post listing with admin-gated create and delete.",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Trailing-slash variants fall through to 404 like any other unknown path.
app.router.redirect_slashes = False
app.include_router(posts.router)


@app.middleware("http")
async def cors(request: Request, call_next):
    """Answer preflights before routing and stamp CORS headers on every other response."""
    req = normalize(request)
    bind_request(request_id(request), req.method, req.path)
    headers = cors_headers(req.origin, get_settings().allowed_origin_list)

    if req.method == "OPTIONS":
        return Response(status_code=204, headers=headers)

    response = await call_next(request)
    response.headers.update(headers)
    logger.info("request.completed", status=response.status_code)
    return response


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path (404) and known path with an unsupported method (405) both fall through to 404.
    if exc.status_code in (404, 405):
        not_found = NotFoundError(method=request.method, path=request.url.path)
        return JSONResponse(status_code=not_found.status_code, content=not_found.to_body())
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Runs outside the cors middleware, so the headers are attached here.
    logger.exception("request.failed")
    origin = request.headers.get("origin", "")
    return JSONResponse(
        status_code=500,
        content=ApiError().to_body(),
        headers=cors_headers(origin, get_settings().allowed_origin_list),
    )


# Mangum adapts the FastAPI ASGI app for AWS Lambda + API Gateway (REST or HTTP API).
handler = Mangum(app, lifespan="off")
