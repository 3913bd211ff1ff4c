# backend/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from config import settings
from database import init_db

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# Request lines from httpx are noise next to the service info records
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

# Router imports
from routes.auth import router as auth_router
from routes.cart import router as cart_router
from routes.checkout import router as checkout_router
from routes.service_info import router as service_info_router

# Create storage tables
init_db()

app = FastAPI(title="Storefront State API", version="1.0.0")

# CORS: the storefront UI runs on its own origin
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
if settings.FRONTEND_URL not in origins:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Router registration
app.include_router(auth_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(service_info_router)

@app.get("/")
def read_root():
    return {"message": "Storefront State API is running"}
