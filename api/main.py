import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from candidates import router as candidates_router
from core import db, settings
from core.errors import ApiError
from core.logging import setup_logging
from parties import router as parties_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # A database that is unreachable at boot is fatal: the app never serves.
    try:
        pool = await db.create_pool()
    except Exception:
        logger.exception("database_connect_failed db_host=%s db_name=%s", settings.db_host(), settings.db_name())
        raise
    try:
        await db.ping(pool)
    except db.QueryError:
        logger.exception("database_ping_failed db_host=%s db_name=%s", settings.db_host(), settings.db_name())
        await pool.close()
        raise
    app.state.pool = pool
    logger.info("database_connected db_name=%s", settings.db_name())
    try:
        yield
    finally:
        await app.state.pool.close()
        app.state.pool = None


app = FastAPI(title="Election API", lifespan=lifespan)

app.include_router(candidates_router.router, tags=["candidates"])
app.include_router(parties_router.router, tags=["parties"])


@app.get("/health")
async def health(pool=Depends(db.get_pool)) -> Response:
    try:
        ok = await db.ping(pool)
    except db.QueryError as exc:
        logger.warning("health_check_failed error=%s", exc.message)
        ok = False
    if not ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "disconnected"},
        )
    return JSONResponse(content={"status": "ok", "database": "connected"})


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Path parameters such as a non-integer id end up here.
    errors = [
        f"{'.'.join(str(loc) for loc in err['loc'] if loc not in ('path', 'query', 'body'))}: {err['msg']}"
        for err in exc.errors()
    ]
    logger.info("request_rejected path=%s errors=%s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": errors})


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Unknown paths and unsupported methods both end with an empty 404.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host(), port=settings.port())
