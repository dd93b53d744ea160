from rich import print

from modechoice._version import __version__
from modechoice.cli._app import app


@app.command()
def info():
    """Show the version banner."""
    print(
        f"""\
:bus: [bold dark_goldenrod]modechoice[/bold dark_goldenrod]
  [not bold]Version {__version__}[/not bold]
  Vehicle feasibility constraints and logit selection for mode choice
"""
    )
