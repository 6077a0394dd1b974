"""
Telemetry Publisher

Polls the record generators on a fixed interval and emits either the
structured record (JSON) or its wire encoding. Used by the streaming
server, and runnable on its own to print samples to stdout.

Usage:
    python -m telemetry.publisher --domain gps --raw
    python -m telemetry.publisher --domain ais --ais-type 5 --count 10
    python -m telemetry.publisher --domain lorawan --rate 0.2
"""

import argparse
import asyncio
import json
import logging
import time
from datetime import datetime, timezone
from typing import AsyncIterator, Optional, Union

from dotenv import load_dotenv

from telemetry.config import get_settings
from telemetry.encoders import encode_record
from telemetry.generators import GENERATORS, select_ais_message_type
from telemetry.schema import DataType
from telemetry.shared.random_source import RandomValueService

logger = logging.getLogger(__name__)

DOMAINS = {
    "adsb": DataType.ADSB,
    "ais": DataType.AIS,
    "gps": DataType.GPS,
    "lorawan": DataType.LORAWAN,
}


class TelemetryPublisher:
    """
    Pull-based sample source for every sensor domain.

    All generators share the one random source handed in; records are
    produced and encoded fresh for each sample.
    """

    def __init__(self, rng: Optional[RandomValueService] = None):
        self.rng = rng or RandomValueService()
        self.generators = {data_type: cls(self.rng) for data_type, cls in GENERATORS.items()}
        self.running = False

        # Stats
        self.samples_published = 0
        self.start_time: Optional[datetime] = None

    def resolve_domain(self, domain: str) -> DataType:
        """Map a domain name (ais, adsb, gps, lorawan) to its data type"""
        try:
            return DOMAINS[domain.lower()]
        except KeyError:
            raise ValueError(f"Unknown domain: {domain}") from None

    def generate(self, domain: str, ais_type: Optional[int] = None):
        """Generate one record for a domain"""
        data_type = self.resolve_domain(domain)
        if data_type == DataType.AIS and ais_type is not None:
            return self.generators[data_type].generate(message_type=ais_type)
        return self.generators[data_type].generate()

    def sample(
        self,
        domain: str,
        raw: bool = False,
        ais_type: Optional[int] = None
    ) -> Union[dict, str]:
        """One record as a JSON-ready dict, or its wire encoding if raw"""
        record = self.generate(domain, ais_type=ais_type)
        self.samples_published += 1
        if raw:
            return encode_record(record, self.rng)
        return record.to_dict()

    async def stream(
        self,
        domain: str,
        interval_s: float,
        raw: bool = False,
        limit: Optional[int] = None,
        ais_type: Optional[int] = None
    ) -> AsyncIterator[Union[dict, str]]:
        """
        Yield a sample every interval_s seconds.

        The first sample is immediate. Stops after limit samples, or when
        stop() is called.
        """
        self.resolve_domain(domain)
        if ais_type is not None:
            select_ais_message_type(ais_type)

        self.running = True
        self.start_time = self.start_time or datetime.now(timezone.utc)
        logger.info(f"Starting {domain} stream (raw={raw}, interval={interval_s}s)")

        count = 0
        try:
            while self.running:
                batch_start = time.time()

                yield self.sample(domain, raw=raw, ais_type=ais_type)
                count += 1

                if limit is not None and count >= limit:
                    break

                elapsed = time.time() - batch_start
                sleep_time = max(0, interval_s - elapsed)
                if sleep_time > 0:
                    await asyncio.sleep(sleep_time)

                # Log stats periodically
                if self.samples_published % 500 == 0:
                    logger.info(f"Stats: published={self.samples_published}")

        except asyncio.CancelledError:
            logger.info(f"{domain} stream cancelled")
            raise
        finally:
            logger.info(f"{domain} stream stopped after {count} samples")

    def stop(self):
        """Stop all running streams"""
        self.running = False

    def get_stats(self) -> dict:
        """Get publisher statistics"""
        return {
            "samples_published": self.samples_published,
            "running": self.running,
            "uptime_seconds": (datetime.now(timezone.utc) - self.start_time).total_seconds()
                if self.start_time else 0,
            "generators": {
                data_type.value: generator.get_stats()
                for data_type, generator in self.generators.items()
            },
        }


def format_sample(sample: Union[dict, str]) -> str:
    if isinstance(sample, str):
        return sample
    return json.dumps(sample, ensure_ascii=False)


async def main():
    load_dotenv()
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Sensor Telemetry Publisher")
    parser.add_argument(
        "--domain",
        choices=sorted(DOMAINS),
        default="gps",
        help="Sensor domain to publish"
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Emit wire-format messages instead of JSON records"
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=None,
        help="Samples per second (default: configured interval for the domain)"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Stop after this many samples"
    )
    parser.add_argument(
        "--ais-type",
        type=int,
        default=None,
        help="AIS message type to publish (1-27, AIS domain only)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.random_seed,
        help="Random seed for a repeatable sequence"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - PUBLISHER - %(levelname)s - %(message)s'
    )

    if args.ais_type is not None:
        try:
            select_ais_message_type(args.ais_type)
        except ValueError as e:
            parser.error(str(e))

    if args.rate is not None and args.rate <= 0:
        parser.error("--rate must be positive")

    interval_s = 1.0 / args.rate if args.rate else settings.interval_for(args.domain)
    publisher = TelemetryPublisher(RandomValueService(args.seed))

    async for sample in publisher.stream(
        args.domain,
        interval_s,
        raw=args.raw,
        limit=args.count,
        ais_type=args.ais_type,
    ):
        print(format_sample(sample), flush=True)


def cli():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
