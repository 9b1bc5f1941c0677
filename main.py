from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from es_shortener.config import settings
from es_shortener.logging_config import setup_logging
from es_shortener.domain.errors import InvalidUrl, SlugAlreadyInUse, SlugNotFound
from es_shortener.api.v1 import urls, redirect

setup_logging(settings.log_level, json_format=settings.log_format == "json")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="An event-sourced URL shortener built with FastAPI",
    debug=settings.debug
)


######## Domain errors -> HTTP responses

@app.exception_handler(InvalidUrl)
async def invalid_url_handler(request: Request, exc: InvalidUrl):
    return JSONResponse(
        status_code=422,  # same code FastAPI uses for request validation errors
        content={"detail": str(exc)}
    )


@app.exception_handler(SlugAlreadyInUse)
async def slug_in_use_handler(request: Request, exc: SlugAlreadyInUse):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)}
    )


@app.exception_handler(SlugNotFound)
async def slug_not_found_handler(request: Request, exc: SlugNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)}
    )


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(urls.router, prefix="/api/v1")
app.include_router(urls.events_router, prefix="/api/v1")
# Catch-all /{slug}: must stay last
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
