"""Employee Manager FastAPI application factory.

Entry point: uvicorn app.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.database import async_engine
from app.errors import EmployeeManagerError
from app.middleware import RequestIDMiddleware, get_request_id
from app.routers import catalog, departments, employees, equipment, health, positions


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    yield

    await async_engine.dispose()


app = FastAPI(title="Employee Manager", lifespan=lifespan)

app.add_middleware(RequestIDMiddleware)


@app.exception_handler(EmployeeManagerError)
async def employee_manager_error_handler(
    request: Request, exc: EmployeeManagerError
) -> JSONResponse:
    # Top-level "message" is what the front end displays
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "request_id": get_request_id(),
            },
        },
        headers={"X-Request-ID": get_request_id()},
    )


app.include_router(health.router)
app.include_router(departments.router)
app.include_router(positions.router)
app.include_router(employees.router)
app.include_router(equipment.router)
app.include_router(catalog.router)
