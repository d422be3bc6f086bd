import logging
import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

logging.basicConfig(
    level=ApplicationConfig.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app(ApplicationConfig)


def main():
    # uvicorn stops accepting connections on SIGINT/SIGTERM, drains in-flight
    # requests for at most SHUTDOWN_GRACE_SECONDS, then runs the lifespan shutdown
    uvicorn.run(
        app,
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=ApplicationConfig.SHUTDOWN_GRACE_SECONDS,
    )


if __name__ == "__main__":
    main()
