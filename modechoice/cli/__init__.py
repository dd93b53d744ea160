from ._app import app
from .check import check, feasibility  # noqa: F401
from .info import info  # noqa: F401

__all__ = ["app"]
