import logging

import uvicorn
from fastapi import FastAPI

from .config import get_settings
from .routers import scrape

settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Deal Scraper", version="0.1.0")


@app.get("/health")
def healthcheck():
    return {"status": "ok", "env": settings.env}


app.include_router(scrape.router, tags=["scrape"])


def run():
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
