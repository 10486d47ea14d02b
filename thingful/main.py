import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thingful.controllers import health_controller, thing_controller
from thingful.core.config import settings
from thingful.core.dependencies import lifespan
from thingful.core.errors import setup_error_handling
from thingful.core.rate_limit import setup_rate_limiting

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Cria a aplicação FastAPI com lifespan
app = FastAPI(title="Thingful API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_rate_limiting(app)
setup_error_handling(app)


# --- Endpoints ---
app.include_router(thing_controller.router)
app.include_router(health_controller.router)


def run():
    uvicorn.run("thingful.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
