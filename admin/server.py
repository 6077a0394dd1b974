"""
Telemetry Streaming Server

FastAPI server exposing simulated sensor data as server-sent events.

Endpoints:
- GET /dummy-data/{domain}                - Stream JSON records
- GET /dummy-data/{domain}-raw            - Stream wire-format messages
- GET /dummy-data/{domain}/sample         - Single JSON record
- GET /dummy-data/{domain}-raw/sample     - Single wire-format message
- GET /dummy-data/ais/type/{message_type} - Stream AIS records of one type (1-27)
- GET /api/stats                          - Publisher statistics

Domains: adsb, ais, gps, lorawan. Streams accept ?limit=N to end after N events.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Tuple

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, StreamingResponse

from telemetry.config import TelemetrySettings, get_settings
from telemetry.generators import select_ais_message_type
from telemetry.publisher import TelemetryPublisher, format_sample
from telemetry.shared.random_source import RandomValueService

logger = logging.getLogger(__name__)

RAW_SUFFIX = "-raw"

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}


def sse_event(data: str) -> str:
    """Frame text as one SSE event, one data: line per text line"""
    return "".join(f"data: {line}\n" for line in data.split("\n")) + "\n"


def create_app(
    settings: Optional[TelemetrySettings] = None,
    publisher: Optional[TelemetryPublisher] = None
) -> FastAPI:
    """Build the streaming app around one publisher"""
    settings = settings or get_settings()
    publisher = publisher or TelemetryPublisher(RandomValueService(settings.random_seed))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        logger.info("Telemetry streaming server started")
        yield
        publisher.stop()
        logger.info(f"Telemetry streaming server stopped: {publisher.get_stats()}")

    app = FastAPI(
        title="Sensor Telemetry Simulator",
        description="Simulated ADSB, AIS, GPS and LoRaWAN telemetry streams",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.publisher = publisher

    def parse_stream_name(stream_name: str) -> Tuple[str, bool]:
        """Split 'gps-raw' into ('gps', True); 404 for unknown domains"""
        raw = stream_name.endswith(RAW_SUFFIX)
        domain = stream_name[:-len(RAW_SUFFIX)] if raw else stream_name
        try:
            publisher.resolve_domain(domain)
        except ValueError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return domain, raw

    async def event_stream(
        domain: str,
        raw: bool,
        limit: Optional[int],
        ais_type: Optional[int] = None
    ) -> AsyncIterator[str]:
        async for sample in publisher.stream(
            domain,
            settings.interval_for(domain),
            raw=raw,
            limit=limit,
            ais_type=ais_type,
        ):
            yield sse_event(format_sample(sample))

    # ============ API Endpoints ============

    @app.get("/dummy-data/ais/type/{message_type}")
    async def stream_ais_by_type(message_type: int, limit: Optional[int] = Query(None, ge=1)):
        """Stream AIS records stamped with one message type"""
        try:
            select_ais_message_type(message_type)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return StreamingResponse(
            event_stream("ais", False, limit, ais_type=message_type),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    @app.get("/dummy-data/{stream_name}/sample")
    async def get_sample(stream_name: str):
        """Single record, or single wire message for '-raw' streams"""
        domain, raw = parse_stream_name(stream_name)
        sample = publisher.sample(domain, raw=raw)
        if raw:
            return PlainTextResponse(sample)
        return sample

    @app.get("/dummy-data/{stream_name}")
    async def stream_samples(stream_name: str, limit: Optional[int] = Query(None, ge=1)):
        """Stream records, or wire messages for '-raw' streams"""
        domain, raw = parse_stream_name(stream_name)
        return StreamingResponse(
            event_stream(domain, raw, limit),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    @app.get("/api/stats")
    async def get_stats():
        """Publisher statistics"""
        return publisher.get_stats()

    return app


app = create_app()


def main():
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - SERVER - %(levelname)s - %(message)s'
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
