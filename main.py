from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.routes.caregiver_routes import router as caregiver_routes
from app.routes.activity_routes import router as activity_routes
from app.routes.stats_routes import router as stats_routes
from app.routes.export_routes import router as export_routes
from app.routes.share_routes import router as share_routes
from app.routes.settings_routes import router as settings_routes

from config.database import init_db
from config.logging_config import get_logger
from config.settings import APP_NAME, APP_VERSION, CORS_ORIGINS

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s API %s started", APP_NAME, APP_VERSION)
    yield


# Create the FastAPI instance
app = FastAPI(
    title=f"{APP_NAME} API",
    version=APP_VERSION,
    description="Backend for logging a baby's feeding, sleep and diaper events",
    lifespan=lifespan,
)

# CORS for the app clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Main router with the /api prefix
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(caregiver_routes)
routerAPI.include_router(activity_routes)
routerAPI.include_router(stats_routes)
routerAPI.include_router(export_routes)
routerAPI.include_router(share_routes)
routerAPI.include_router(settings_routes)
# Attach the router to the main application
app.include_router(routerAPI)


@app.get("/", tags=["Root"])
async def read_root():
    return {"status": f"{APP_NAME} API is up!"}
