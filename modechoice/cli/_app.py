import typer

app = typer.Typer(
    name="modechoice",
    help="Feasibility checks and selection for discrete mode choice.",
    no_args_is_help=True,
)
