"""Main CLI application using Cyclopts.

Apart from ``serve``, the CLI is a thin HTTP client for a running server.
"""

import cyclopts

from sampurnan.cli.commands import catalog, importer, serve, story, template

app = cyclopts.App(
    name="sampurnan",
    help="Sampurnan manuscript gallery - CLI",
)

app.command(serve.serve, name="serve")
app.command(template.template, name="template")
app.command(importer.import_file, name="import")
app.command(catalog.catalog, name="catalog")
app.command(story.story, name="story")


def main() -> None:
    app()
