"""Outbox command - hand pending change events to an external consumer."""

import json

import cyclopts

from pkgledger.cli.console import get_console
from pkgledger.cli.runtime import run
from pkgledger.config import Config
from pkgledger.domain.shared.outbox import Outbox

app = cyclopts.App(name="outbox", help="Drain pending change events")


@app.default
def outbox(ack: bool = False) -> None:
    """Print pending events as JSON lines, oldest first.

    Args:
        ack: Mark the printed events as delivered.
    """

    async def work(uow):
        config = await uow.get(Config)
        box = await uow.get(Outbox)
        pending = await box.fetch_pending(limit=config.outbox.batch_size)
        if ack:
            for event in pending:
                await box.mark_delivered(event.id)
        return pending

    pending = run(work)
    console = get_console()
    for event in pending:
        console.print(
            json.dumps({"type": type(event).__name__, **event.model_dump(mode="json")}),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    if not pending:
        console.info("Outbox is empty")
