import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from labourpay.core.config import settings
from labourpay.api.v1.attendance import router as attendance_router
from labourpay.api.v1.payments import router as payments_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="LabourPay API",
    description="Labour attendance and daily wage calculation",
    version="1.0.0",
    # Swagger UI only in development – set DEBUG=false in production
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"

app.include_router(payments_router, prefix=API_PREFIX)
app.include_router(attendance_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "LabourPay API", "version": "1.0.0"}
