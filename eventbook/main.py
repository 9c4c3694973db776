import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventbook.core.config import CORS_ORIGINS, HOST, get_log_level, get_port
from eventbook.core.exceptions import register_exception_handlers
from eventbook.database.seed import init_db
from eventbook.routes import bookings, events, reports

logging.basicConfig(
    level=getattr(logging, get_log_level(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Event Booking API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Fresh in-memory store with the sample records on every start
init_db()

# Include the routers
app.include_router(events.router)
app.include_router(bookings.router)
app.include_router(reports.router)


def run() -> None:
    port = get_port()
    logger.info("Event Booking API running on http://%s:%s", HOST, port)
    uvicorn.run(app, host=HOST, port=port, log_level=get_log_level().lower())


if __name__ == "__main__":
    run()
