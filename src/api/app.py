import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from .error import ClientError, ServerError
from .middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str) -> dict:
    return {"message": message, "error": {"code": code, "message": message}}


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.base_error.code, exc.base_error.message),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.base_error.code, exc.base_error.message),
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Undecodable or mistyped bodies are bad requests; 422 is kept for title rules
    logger.warning(f"Malformed request body on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("INVALID_JSON", "invalid json"),
    )


async def connect_to_store(ApplicationConfig) -> AsyncIOMotorClient:
    """
    Open the MongoDB client and verify the server answers a ping

    Raises:
        RuntimeError: if MONGO_URI is not configured or the store cannot be
            reached within DB_CONNECT_TIMEOUT_SECONDS
    """
    if not ApplicationConfig.MONGO_URI:
        raise RuntimeError("MONGO_URI not set")

    timeout = ApplicationConfig.DB_CONNECT_TIMEOUT_SECONDS
    client = AsyncIOMotorClient(
        ApplicationConfig.MONGO_URI,
        serverSelectionTimeoutMS=int(timeout * 1000),
    )

    try:
        await asyncio.wait_for(client.admin.command("ping"), timeout=timeout)
    except (PyMongoError, asyncio.TimeoutError) as e:
        client.close()
        raise RuntimeError(f"Could not connect to MongoDB: {e}") from e

    logger.info("Connected to MongoDB!")
    return client


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: refuse to serve without a working store connection
        try:
            client = await connect_to_store(ApplicationConfig)
        except RuntimeError as e:
            logger.error(str(e))
            raise

        app.state.mongo_client = client
        app.state.task_collection = client[ApplicationConfig.MONGODB_DB_NAME][
            ApplicationConfig.MONGODB_COLLECTION
        ]

        yield

        # Shutdown: in-flight requests have drained by now
        logger.info("Shutting down, closing MongoDB connection")
        client.close()

    app = FastAPI(title="Task Service", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import health_check, tasks

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(tasks.router, tags=["Tasks"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    return app
