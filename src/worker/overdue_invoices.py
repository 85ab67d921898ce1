"""Overdue Invoice Background Worker

Flags sent invoices whose due date has passed as overdue.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.invoicing import MarkOverdueInvoices, MarkOverdueResultDTO

logger = logging.getLogger(__name__)


class OverdueInvoiceWorker:
    """
    Background worker for overdue invoice detection

    Usage:
        # Run once (typical cron usage)
        worker = OverdueInvoiceWorker()
        result = await worker.run_once()

        # Run continuously
        worker = OverdueInvoiceWorker()
        await worker.run_forever()
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        check_interval_seconds: Optional[int] = None,
    ):
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.check_interval_seconds = (
            check_interval_seconds or ApplicationConfig.OVERDUE_CHECK_INTERVAL_SECONDS
        )

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("OverdueInvoiceWorker initialized")

    async def run_once(self, as_of: Optional[datetime] = None) -> MarkOverdueResultDTO:
        """
        Run one overdue sweep

        Args:
            as_of: Reference time (defaults to now)

        Returns:
            MarkOverdueResultDTO with counts; zero counts when the sweep failed
        """
        as_of = as_of or datetime.utcnow()
        logger.info(f"Checking for invoices overdue as of {as_of.isoformat()}")

        async with self.async_session_factory() as session:
            use_case = MarkOverdueInvoices(
                uow=SqlAlchemyUnitOfWork(session),
                invoice_repo=SqlAlchemyInvoiceRepository(session),
            )
            result = await use_case.execute(as_of=as_of)

        if result.is_err():
            logger.error(f"Overdue sweep failed: {result.error.message} ({result.error.reason})")
            return MarkOverdueResultDTO(checked=0, marked_overdue=0)

        logger.info(
            f"Overdue sweep complete: {result.value.marked_overdue} of "
            f"{result.value.checked} invoices marked overdue"
        )
        return result.value

    async def run_forever(self):
        """Run sweeps every check_interval_seconds until cancelled"""
        logger.info(
            f"Starting continuous overdue detection with {self.check_interval_seconds}s interval"
        )

        while True:
            try:
                await self.run_once()
            except Exception as e:
                logger.error(f"Overdue detection cycle failed: {e}")

            await asyncio.sleep(self.check_interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("OverdueInvoiceWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        # Run once
        python -m src.worker.overdue_invoices

        # Run continuously
        python -m src.worker.overdue_invoices --continuous
    """
    import argparse

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Overdue Invoice Worker")
    parser.add_argument(
        "--continuous", action="store_true", help="Run continuously"
    )
    args = parser.parse_args()

    if not ApplicationConfig.OVERDUE_DETECTION_ENABLED:
        logger.info("Overdue detection disabled by configuration")
        return

    worker = OverdueInvoiceWorker()

    try:
        if args.continuous:
            await worker.run_forever()
        else:
            result = await worker.run_once()
            print("Overdue check complete:")
            print(f"  Invoices checked: {result.checked}")
            print(f"  Marked overdue: {result.marked_overdue}")
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
