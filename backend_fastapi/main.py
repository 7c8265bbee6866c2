import os
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import registrar_manejadores
from backend_fastapi.api.routes.notificaciones import router as notificaciones_router
from backend_fastapi.api.routes.tareas import router as tareas_router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(title="Gestion360 API")

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

registrar_manejadores(app)
app.include_router(tareas_router)
app.include_router(notificaciones_router)
