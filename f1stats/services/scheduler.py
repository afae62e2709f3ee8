"""
Background task scheduler for podium portrait pre-warming
Periodically resolves the current top-3 drivers' portraits so the standings
podium never waits on Wikipedia
"""

import logging
from datetime import datetime
from typing import Dict

from apscheduler.schedulers.background import BackgroundScheduler

from f1stats.errors import F1ApiError
from f1stats.models import driver_standing_from_api

logger = logging.getLogger(__name__)

scheduler = BackgroundScheduler()

PODIUM_SIZE = 3


def warm_podium_pictures(f1_client, resolver) -> Dict[str, str]:
    """
    Resolve portraits for the top of the driver championship.
    Returns {driver_id: image_url}; empty if standings are unavailable.
    """
    try:
        rows = f1_client.get_driver_championship(limit=PODIUM_SIZE)
    except F1ApiError as e:
        logger.warning(f"[Scheduler] Standings unavailable, skipping podium warm-up: {e}")
        return {}

    refs = [driver_standing_from_api(row).ref() for row in rows[:PODIUM_SIZE]]
    pictures = resolver.resolve_many(refs)
    logger.info(f"[Scheduler] Podium portraits ready: {', '.join(pictures) or 'none'}")
    return pictures


def clear_expired_cache(cache) -> int:
    removed = cache.clear_expired_local()
    if removed:
        logger.info(f"[Scheduler] Cleared {removed} expired cache entries")
    return removed


def start_scheduler(f1_client, resolver, hours: int = 6):
    """Start the background scheduler"""
    if scheduler.running:
        logger.info("[Scheduler] Scheduler already running")
        return

    try:
        # first run straight away, then every `hours`
        scheduler.add_job(
            warm_podium_pictures,
            'interval',
            hours=hours,
            args=[f1_client, resolver],
            id='warm_podium_pictures',
            name='Pre-warm podium driver portraits',
            replace_existing=True,
            next_run_time=datetime.now(),
        )

        # local-mode cache only drops expired API payloads when they are read
        scheduler.add_job(
            clear_expired_cache,
            'interval',
            hours=1,
            args=[resolver.cache],
            id='clear_expired_cache',
            name='Drop expired local cache entries',
            replace_existing=True,
        )

        scheduler.start()
        logger.info(f"[Scheduler] Background scheduler started - podium portraits refresh every {hours} hours")
    except Exception as e:
        logger.error(f"[Scheduler] Failed to start scheduler: {str(e)}")


def stop_scheduler():
    """Stop the background scheduler"""
    if scheduler.running:
        scheduler.shutdown()
        logger.info("[Scheduler] Background scheduler stopped")
