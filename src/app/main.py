"""Main file for the backend. Where the endpoints of the soil description application are defined."""

import os

import app.common.log as log
from app.api.v1.router import router as v1_router
from app.common.log import get_app_logger
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from mangum import Mangum

# Logging of the service, configured by the SOILDESC_ settings
log.setup_logging()
logger = get_app_logger()

load_dotenv()

root_path = os.getenv("ENV", default="")
app = FastAPI(title="Soil description API", root_path=f"/{root_path}" if root_path else "")


def describe_openapi():
    """OpenAPI schema of the service, without the 422 responses.

    Validation errors are returned as 400 by `validation_exception_handler`, so the 422 responses generated by
    FastAPI are never sent.
    """
    if not app.openapi_schema:
        app.openapi_schema = get_openapi(title=app.title, version=app.version, routes=app.routes)
        for path_item in app.openapi_schema["paths"].values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
    return app.openapi_schema


app.openapi = describe_openapi


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors."""
    errors = exc.errors()
    try:
        content = {"detail": errors[0]["ctx"]["error"].args[0]}
    except (IndexError, KeyError, AttributeError):
        error = errors[0] if errors else {"loc": ("body",), "msg": "Invalid request"}
        content = {"detail": "{} field - {}".format(error["loc"][-1], error["msg"])}
    return JSONResponse(content=content, status_code=status.HTTP_400_BAD_REQUEST)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
)


####################################################################################################
### Health Check
####################################################################################################
@app.get("/health", tags=["health"])
def get_health():
    """Check the health of the application.

    This endpoint provides a simple health check to verify that the application is up and running.

    ### Returns
    - **200 OK**: The application is running and responsive.
    - **Response Body**: `"Healthy"`.
    """
    return "Healthy"


####################################################################################################
### Version
####################################################################################################
@app.get("/version")
def get_version():
    """Return the current version of the application, as given by the `APP_VERSION` environment variable.

    ### Returns
    - **200 OK**: JSON object with the application version, e.g., `{"version": "1.0.0"}`.
    """
    return {"version": os.getenv("APP_VERSION")}


####################################################################################################
### Router
####################################################################################################
logger.debug("Including router in FastAPI app...")
app.include_router(v1_router)

# Allows the integration with AWS Lambda
handler = Mangum(app)
