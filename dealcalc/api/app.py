"""FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealcalc.api.routes import analysis
from dealcalc.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Deal Calc",
    description="Real estate purchase projection and returns engine",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def main():
    uvicorn.run(
        app, host=settings.host, port=settings.port, log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
