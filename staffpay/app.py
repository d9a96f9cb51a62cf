import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from staffpay.application import configure_payroll_service
from staffpay.core.settings import load_settings
from staffpay.errors import register_error_handlers
from staffpay.infrastructure import HttpWorkRecordRepository
from staffpay.routes import payroll, staff

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Staff Payroll API", version="0.1.0")

    records = None
    if settings.api_base_url:
        records = HttpWorkRecordRepository(settings.api_base_url, timeout=settings.api_timeout)
        logger.info("persisting work records through %s", settings.api_base_url)
    configure_payroll_service(records, company_name=settings.company_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(staff.router, prefix="/api")
    app.include_router(payroll.router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Provide a lightweight landing page for container checks."""
        return JSONResponse(
            {
                "message": "Staff Payroll API",
                "docs": "/docs",
                "health": "/api/staff",
            }
        )

    return app


app = create_app()
