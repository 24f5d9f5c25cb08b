"""Main CLI application using Cyclopts.

Each command opens its own container, runs one unit of work against the
configured record store and exits.
"""

import cyclopts

from pkgledger.cli.commands import events, outbox, publish, show, transfer, update

app = cyclopts.App(
    name="pkgledger",
    help="Content-addressed, append-only package metadata registry",
)

app.command(publish.app, name="publish")
app.command(update.app, name="update")
app.command(transfer.app, name="transfer")
app.command(show.app, name="show")
app.command(events.app, name="events")
app.command(outbox.app, name="outbox")


if __name__ == "__main__":
    app()
