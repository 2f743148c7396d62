import os
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from scraptrade.api.routes import router as api_router
from scraptrade.db import Base, engine
from scraptrade.errors import StorageError
from scraptrade.utils import logger
import scraptrade.models  # noqa: F401 ensure models are imported so tables are known

# create FastAPI instance
app = FastAPI(title="scraptrade")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(StorageError)
def storage_error_handler(request: Request, exc: StorageError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable, try again later"})


@app.on_event("startup")
def on_startup_create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready on %s", engine.url.render_as_string(hide_password=True))
