"""Periodic full crawls on an APScheduler interval trigger."""

import logging
import signal
import sys
from datetime import datetime
from typing import Optional

from apscheduler.schedulers.blocking import BlockingScheduler

from config import SCRAPE_INTERVAL_MINUTES

logger = logging.getLogger(__name__)

JOB_ID = "whisky_scraper"


def _scrape_job(max_pages: Optional[int] = None, delay: Optional[float] = None):
    """One scheduled run. Every run starts a fresh crawl of every site."""
    from scraper import scrape_all
    logger.info("=== Scheduled crawl starting ===")
    try:
        total = scrape_all(max_pages=max_pages, delay=delay)
        logger.info(f"=== Scheduled crawl done. {total} records ===")
    except Exception as e:
        logger.error(f"Scheduled crawl failed: {e}")


def build_scheduler(
    max_pages: Optional[int] = None, delay: Optional[float] = None
) -> BlockingScheduler:
    """Scheduler with the crawl job due now and every interval after."""
    scheduler = BlockingScheduler()
    scheduler.add_job(
        _scrape_job,
        "interval",
        minutes=SCRAPE_INTERVAL_MINUTES,
        next_run_time=datetime.now(),
        max_instances=1,
        coalesce=True,
        kwargs={"max_pages": max_pages, "delay": delay},
        id=JOB_ID,
        name="Whisky crawl",
    )
    return scheduler


def run_scheduler(max_pages: Optional[int] = None, delay: Optional[float] = None):
    """Block in the scheduler until SIGINT or SIGTERM."""
    scheduler = build_scheduler(max_pages=max_pages, delay=delay)

    def stop(signum, frame):
        logger.info("Stopping crawl scheduler")
        scheduler.shutdown(wait=False)
        sys.exit(0)

    signal.signal(signal.SIGINT, stop)
    signal.signal(signal.SIGTERM, stop)

    logger.info(f"Crawling every {SCRAPE_INTERVAL_MINUTES} minutes, first run now")
    scheduler.start()
