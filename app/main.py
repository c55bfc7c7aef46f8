from fastapi import FastAPI, Request

# Import routers
from app.routers import vapi
from app.core.firebase import initialize_firebase, close_firestore_client
from app.core.config import get_settings
from app.core.dependencies import reset_llm_client
from app.core.exceptions import global_exception_handler
from app.core.logger import setup_logging
from mangum import Mangum
# Initialize settings
settings = get_settings()
setup_logging(settings.LOG_LEVEL)

# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION
)

app.add_exception_handler(Exception, global_exception_handler)

# Permissive CORS headers on every response, preflight and errors included
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(settings.cors_headers)
    return response

# Initialize Firebase on startup
@app.on_event("startup")
async def startup_event():
    initialize_firebase()

@app.on_event("shutdown")
async def shutdown_event():
    close_firestore_client()
    reset_llm_client()

# Include routers
app.include_router(vapi.router, prefix="/api/vapi", tags=["Interview Generation"])

@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "description": settings.DESCRIPTION,
        "endpoints": {
            "generate": "/api/vapi/generate",
            "docs": "/docs",
            "health": "/health"
        }
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "debug": settings.DEBUG
    }

handler = Mangum(app)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
