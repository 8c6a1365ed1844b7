from __future__ import annotations

import asyncio
import time

import aiohttp

from costtree.api.client import ApiError, MockApiClient
from costtree.config import Settings, get_settings
from costtree.logging import configure_logging, get_logger
from costtree.models import Expense, Unit
from costtree.pipeline import run
from costtree.services.present import render_json, render_text
from costtree.services.tree import HierarchyCycleError


async def fetch_inputs(client: MockApiClient, settings: Settings) -> tuple[list[Unit], list[Expense]]:
    units_task = asyncio.create_task(client.fetch_units(settings.units_resource))
    expenses_task = asyncio.create_task(client.fetch_expenses(settings.expenses_resource))
    try:
        units, expenses = await asyncio.gather(units_task, expenses_task)
    except BaseException:
        # gather leaves the sibling running when one fetch fails
        for task in (units_task, expenses_task):
            task.cancel()
        await asyncio.gather(units_task, expenses_task, return_exceptions=True)
        raise
    return units, expenses


async def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    log = get_logger(__name__)
    started = time.perf_counter()

    async with aiohttp.ClientSession() as session:
        client = MockApiClient(session, settings.api_root, timeout=settings.request_timeout)
        try:
            units, expenses = await fetch_inputs(client, settings)
        except ApiError as exc:
            log.error("run.failed", resource=exc.resource, status=exc.status, error=str(exc))
            return 1

    try:
        output = run(units, expenses, root_id=settings.root_parent_id)
    except HierarchyCycleError as exc:
        log.error("run.failed", unit_id=exc.unit_id, error=str(exc))
        return 1

    if settings.output_format == "text":
        print(render_text(output))
    else:
        print(render_json(output))

    log.info("run.finished", elapsed=round(time.perf_counter() - started, 4))
    return 0


def cli() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
